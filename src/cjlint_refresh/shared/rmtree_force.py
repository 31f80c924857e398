from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Callable


def _make_writable(func: Callable[[str], None], path: str, exc: BaseException) -> None:
    """onexc hook for shutil.rmtree: clear read-only bits and retry once.

    git marks pack files read-only, which breaks plain rmtree on some systems.
    """
    if isinstance(exc, FileNotFoundError):
        return
    parent = os.path.dirname(path)
    for target in (parent, path):
        try:
            os.chmod(target, os.stat(target).st_mode | stat.S_IWUSR | stat.S_IXUSR)
        except OSError:
            pass
    func(path)


def rmtree_force(path: Path) -> bool:
    """Recursively delete path.

    Returns:
        True if something was removed, False if path did not exist

    Raises:
        OSError: If the tree could not be removed
    """
    if not path.exists() and not path.is_symlink():
        return False
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    shutil.rmtree(path, onexc=_make_writable)
    return True
