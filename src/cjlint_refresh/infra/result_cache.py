from __future__ import annotations

from typing import Any, Callable

import redis

from ..core.domain.exceptions import CacheError


class RedisResultCache:
    """Stores serialized results under ``<namespace><repo_url>``.

    Plain SET with no expiry: a newer analysis of the same repository
    overwrites the previous one.
    """

    def __init__(
        self,
        *,
        url: str | None,
        namespace: str = "cjlint_",
        socket_timeout: float | None = None,
        client_factory: Callable[..., Any] | None = None,
    ) -> None:
        self._url = url
        self._namespace = namespace
        self._socket_timeout = socket_timeout
        self._client_factory = client_factory or redis.Redis.from_url

    def key_for(self, repo_url: str) -> str:
        return f"{self._namespace}{repo_url}"

    def _connect(self) -> Any:
        if not self._url:
            raise CacheError("KV_URL not set")
        try:
            return self._client_factory(
                self._url,
                socket_timeout=self._socket_timeout,
                socket_connect_timeout=self._socket_timeout,
                decode_responses=True,
            )
        except (redis.RedisError, ValueError) as exc:
            raise CacheError(f"Failed to create Redis client: {exc}") from exc

    def store(self, repo_url: str, payload: str) -> None:
        client = self._connect()
        try:
            client.set(self.key_for(repo_url), payload)
        except redis.RedisError as exc:
            raise CacheError(str(exc)) from exc
        finally:
            client.close()

    def load(self, repo_url: str) -> str | None:
        client = self._connect()
        try:
            return client.get(self.key_for(repo_url))
        except redis.RedisError as exc:
            raise CacheError(str(exc), summary="Failed to read from cache") from exc
        finally:
            client.close()
