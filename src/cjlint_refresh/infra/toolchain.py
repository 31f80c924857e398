from __future__ import annotations

import logging
import tarfile
import threading
from pathlib import Path

import zstandard

from ..core.domain.exceptions import ToolchainError

logger = logging.getLogger(__name__)


class Toolchain:
    """Private cjlint installation unpacked from a bundled .tar.zst payload.

    Extraction happens at most once per process; concurrent callers wait on
    a lock and then see the already unpacked tree.
    """

    def __init__(
        self,
        *,
        home: Path,
        archive: Path | None,
        executable: str = "tools/bin/cjlint",
    ) -> None:
        self.home = home
        self.archive = archive
        self.executable = home / executable
        self._lock = threading.Lock()

    @property
    def environment(self) -> dict[str, str]:
        """Variables cjlint needs to find its shared libraries and home."""
        return {
            "LD_LIBRARY_PATH": str(self.home),
            "CANGJIE_HOME": str(self.home),
        }

    def is_extracted(self) -> bool:
        return self.home.is_dir() and self.executable.is_file()

    def ensure_extracted(self) -> Path:
        """Unpack the payload unless the executable is already in place.

        Returns:
            Path to the cjlint executable

        Raises:
            ToolchainError: If the payload is missing or cannot be unpacked
        """
        with self._lock:
            if self.is_extracted():
                return self.executable

            if self.archive is None or not self.archive.is_file():
                raise ToolchainError(f"cjlint payload not found: {self.archive}")

            logger.info("toolchain_extract", extra={
                "payload": {"archive": str(self.archive), "home": str(self.home)},
            })
            try:
                self.home.mkdir(parents=True, exist_ok=True)
                self._unpack()
                if not self.executable.is_file():
                    raise ToolchainError(f"cjlint missing after extraction: {self.executable}")
                self.executable.chmod(0o755)
            except (OSError, tarfile.TarError, zstandard.ZstdError) as exc:
                raise ToolchainError(f"Failed to extract cjlint: {exc}") from exc

            logger.info("toolchain_ready", extra={"payload": {"executable": str(self.executable)}})
            return self.executable

    def _unpack(self) -> None:
        dctx = zstandard.ZstdDecompressor()
        with self.archive.open("rb") as fh, dctx.stream_reader(fh) as reader:
            with tarfile.open(fileobj=reader, mode="r|") as tar:
                tar.extractall(self.home, filter="tar")
