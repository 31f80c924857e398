import sys
from pathlib import Path
import pytest
from dotenv import load_dotenv
from helpers import mark_by_dir

load_dotenv()


@pytest.fixture(autouse=True)
def _ensure_src_on_syspath():
    # Add project src/ to sys.path for src-layout imports
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    yield


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # Keep developer settings out of config-driven tests
    monkeypatch.delenv("KV_URL", raising=False)


TESTS = Path(__file__).parent

def pytest_collection_modifyitems(config, items):
    # Mark tests by directory structure
    mark_by_dir(items, TESTS / "cjlint_refresh" / "core", pytest.mark.unit)
    mark_by_dir(items, TESTS / "cjlint_refresh" / "infra", pytest.mark.integration)
    mark_by_dir(items, TESTS / "cjlint_refresh" / "app", pytest.mark.e2e)
    mark_by_dir(items, TESTS / "cjlint_refresh" / "shared", pytest.mark.unit)
