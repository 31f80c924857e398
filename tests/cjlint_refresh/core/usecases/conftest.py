"""Shared test fixtures and fakes for UseCase tests."""
import json
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from cjlint_refresh.core.domain.exceptions import AnalyzerError, CloneError, ManifestError
from cjlint_refresh.core.domain.models import WorkingCopy

from helpers import finding

FAKE_ROOT = Path("/tmp/cjrepo_fake")
FAKE_COMMIT = "0123456789abcdef0123456789abcdef01234567"


class FakeWorkingCopies:
    def __init__(self, fail_clone: bool = False):
        self.fail_clone = fail_clone
        self.acquired: list[str] = []
        self.released: list[WorkingCopy] = []

    def acquire(self, repo_url: str) -> WorkingCopy:
        if self.fail_clone:
            raise CloneError("repository not found")
        self.acquired.append(repo_url)
        return WorkingCopy(path=FAKE_ROOT, commit=FAKE_COMMIT)

    def release(self, working_copy: WorkingCopy) -> None:
        if working_copy.released:
            return
        working_copy.released = True
        self.released.append(working_copy)

    @contextmanager
    def checkout(self, repo_url: str) -> Iterator[WorkingCopy]:
        wc = self.acquire(repo_url)
        try:
            yield wc
        finally:
            self.release(wc)


class FakeManifests:
    def __init__(self, name: str | None = "demo_pkg"):
        self._name = name
        self.roots: list[Path] = []

    def find_package_name(self, root: Path) -> str:
        self.roots.append(root)
        if self._name is None:
            raise ManifestError("No cjpm.toml found")
        return self._name


class FakeAnalyzer:
    def __init__(self, report: str | None = None, exit_code: int = 0):
        self._report = report if report is not None else json.dumps([
            finding(f"{FAKE_ROOT}/src/main.cj"),
            finding(f"{FAKE_ROOT}/src/util/io.cj", level="SUGGESTIONS", line=7),
        ])
        self._exit_code = exit_code
        self.runs: list[Path] = []

    def run(self, root: Path) -> str:
        self.runs.append(root)
        if self._exit_code != 0:
            raise AnalyzerError(f"cjlint command failed with exit code: {self._exit_code}")
        return self._report


class FakeCache:
    def __init__(self):
        self.data: dict[str, str] = {}
        self.writes: list[tuple[str, str]] = []

    def store(self, repo_url: str, payload: str) -> None:
        self.writes.append((repo_url, payload))
        self.data[f"cjlint_{repo_url}"] = payload

    def load(self, repo_url: str) -> str | None:
        return self.data.get(f"cjlint_{repo_url}")


class FakeLogger:
    """Fake logger recording event names."""
    def __init__(self):
        self.events: list[str] = []

    def debug(self, message: str, **kwargs) -> None:
        self.events.append(message)

    def info(self, message: str, **kwargs) -> None:
        self.events.append(message)

    def warning(self, message: str, **kwargs) -> None:
        self.events.append(message)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self.events.append(message)

    def exception(self, message: str, **kwargs) -> None:
        self.events.append(message)
