from __future__ import annotations

import tomllib
from pathlib import Path

from ..core.domain.exceptions import ManifestError


class ManifestLocator:
    """Finds the cjpm manifest of a checkout and reads its package name."""

    def __init__(self, *, filename: str = "cjpm.toml") -> None:
        self._filename = filename

    def find_manifests(self, root: Path) -> list[Path]:
        """Return every manifest under root, shallowest first.

        Ties at the same depth are ordered by relative path so the choice
        does not depend on directory listing order.
        """
        matches = [p for p in root.rglob(self._filename) if p.is_file()]

        def key(p: Path) -> tuple[int, str]:
            rel = p.relative_to(root)
            return len(rel.parts), rel.as_posix()

        return sorted(matches, key=key)

    def find_package_name(self, root: Path) -> str:
        manifests = self.find_manifests(root)
        if not manifests:
            raise ManifestError(f"No {self._filename} found")

        manifest = manifests[0]
        try:
            content = manifest.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(f"Failed to read {self._filename}: {exc}") from exc

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise ManifestError(f"Failed to parse TOML: {exc}") from exc

        package = data.get("package")
        name = package.get("name") if isinstance(package, dict) else None
        if not isinstance(name, str):
            raise ManifestError(f"package.name not found in {self._filename}")
        return name
