"""Shared fixtures for app-level tests."""
import pytest
from dependency_injector import providers

from cjlint_refresh.app.config import (
    AnalyzerConfig,
    AppConfig,
    CacheConfig,
    LoggingConfig,
    ToolchainConfig,
    WorkspaceConfig,
)
from cjlint_refresh.app.container import Container
from cjlint_refresh.infra.result_cache import RedisResultCache

from helpers import create_git_repo, report_body, write_fake_cjlint
from helpers import FakeRedisFactory


class StubToolchain:
    def __init__(self):
        self.calls = 0

    def ensure_extracted(self):
        self.calls += 1

    def is_extracted(self) -> bool:
        return self.calls > 0


@pytest.fixture
def test_config(tmp_path):
    """Create test configuration with explicit values."""
    return AppConfig(
        workspace=WorkspaceConfig(root=tmp_path / "workspace"),
        toolchain=ToolchainConfig(home=tmp_path / "cj", archive=None),
        analyzer=AnalyzerConfig(output_root=tmp_path / "reports"),
        cache=CacheConfig(url="redis://kv:6379/0"),
        logging=LoggingConfig(console_output=False),
    )


@pytest.fixture
def redis_factory():
    return FakeRedisFactory()


@pytest.fixture
def source_repo(tmp_path):
    """A Cangjie project with one commit; returns (path, sha)."""
    path = tmp_path / "source"
    sha = create_git_repo(path, {
        "cjpm.toml": '[package]\nname = "hello_cj"\ncjc-version = "0.53.4"\n',
        "src/main.cj": "main() { println(\"hi\") }\n",
        "src/util/io.cj": "func read() {}\n",
    })
    return path, sha


@pytest.fixture
def fake_cjlint(test_config):
    """Install a cjlint stand-in reporting two findings."""
    return write_fake_cjlint(
        test_config.toolchain.home,
        report_body("src/main.cj", "src/util/io.cj"),
    )


@pytest.fixture
def container(test_config, redis_factory):
    """Container wired to real infra except the Redis client."""
    container = Container()
    container.config.from_pydantic(test_config)
    container.result_cache.override(
        providers.Factory(
            RedisResultCache,
            url=container.config.cache.url,
            namespace=container.config.cache.namespace,
            client_factory=redis_factory,
        )
    )
    container.init_resources()
    yield container
    container.shutdown_resources()
