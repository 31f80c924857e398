from __future__ import annotations

import json
from pathlib import Path

import redis
from git import Repo


def mark_by_dir(items, base_dir, marker):
    base = Path(base_dir).resolve()
    for item in items:
        # pytest 7/8: item.path on new versions, item.fspath on old ones
        p = getattr(item, "path", None)
        p = Path(p) if p is not None else Path(str(getattr(item, "fspath")))
        try:
            p.resolve().relative_to(base)
        except ValueError:
            continue
        item.add_marker(marker)


def create_git_repo(path: Path, files: dict[str, str]) -> str:
    """Create a git repository at path with one commit holding files.

    Returns the commit sha.
    """
    repo = Repo.init(path)
    for rel, content in files.items():
        target = path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    repo.index.add(list(files))
    sha = repo.index.commit("initial").hexsha
    repo.close()
    return sha


FAKE_CJLINT = """#!/bin/sh
while [ $# -gt 0 ]; do
  case "$1" in
    -f) target="$2"; shift 2 ;;
    -o) out="$2"; shift 2 ;;
    *) shift ;;
  esac
done
{body}
"""


def finding(file: str, *, level: str = "MANDATORY", line: int = 1) -> dict[str, object]:
    return {
        "file": file,
        "line": line,
        "column": 5,
        "endLine": line,
        "endColumn": 12,
        "analyzerName": "G.FMT.01",
        "description": "bad format",
        "defectLevel": level,
        "defectType": "format",
        "language": "cangjie",
    }


def write_fake_cjlint(home: Path, body: str, executable: str = "tools/bin/cjlint") -> Path:
    """Install a shell script standing in for cjlint under home.

    The script sees ``$target`` (the -f argument) and ``$out`` (the -o
    argument) and runs body.
    """
    exe = home / executable
    exe.parent.mkdir(parents=True, exist_ok=True)
    exe.write_text(FAKE_CJLINT.format(body=body), encoding="utf-8")
    exe.chmod(0o755)
    return exe


def report_body(*relative_files: str) -> str:
    """Script body writing one finding per file, rooted at $target."""
    items = [finding("__TARGET__/" + rel) for rel in relative_files]
    payload = json.dumps(items).replace("__TARGET__", "$target")
    return f'cat > "$out" <<EOF\n{payload}\nEOF'


class FakeRedis:
    """In-memory stand-in for redis.Redis, shared across connections."""

    def __init__(self, store: dict[str, str], fail: bool = False):
        self._store = store
        self._fail = fail
        self.closed = False

    def set(self, key, value):
        if self._fail:
            raise redis.ConnectionError("Connection refused")
        self._store[key] = value
        return True

    def get(self, key):
        if self._fail:
            raise redis.ConnectionError("Connection refused")
        return self._store.get(key)

    def close(self):
        self.closed = True


class FakeRedisFactory:
    """Drop-in for redis.Redis.from_url that hands out FakeRedis clients."""

    def __init__(self, fail: bool = False):
        self.store: dict[str, str] = {}
        self.fail = fail
        self.calls: list[tuple[str, dict]] = []
        self.clients: list[FakeRedis] = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        client = FakeRedis(self.store, fail=self.fail)
        self.clients.append(client)
        return client
