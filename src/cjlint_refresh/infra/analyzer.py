from __future__ import annotations

import os
import subprocess
from pathlib import Path

from ..core.domain.exceptions import AnalyzerError
from ..core.ports import LoggerPort, NameGeneratorPort
from .toolchain import Toolchain


class CjlintAnalyzer:
    """Runs cjlint as a subprocess and returns its JSON report.

    The report goes to a uniquely named file in output_dir so concurrent
    runs never share an output path.
    """

    def __init__(
        self,
        *,
        toolchain: Toolchain,
        output_dir: Path,
        names: NameGeneratorPort,
        logger: LoggerPort,
        timeout_s: float | None = None,
    ) -> None:
        self._toolchain = toolchain
        self._output_dir = output_dir
        self._names = names
        self._logger = logger
        self._timeout_s = timeout_s

    def build_command(self, root: Path, output_path: Path) -> list[str]:
        return [
            str(self._toolchain.executable),
            "-f", str(root),
            "-r", "json",
            "-o", str(output_path),
        ]

    def run(self, root: Path) -> str:
        output_path = self._output_dir / f"{self._names.generate()}.json"
        cmd = self.build_command(root, output_path)
        self._logger.debug("analyzer_exec", cmd=" ".join(cmd))

        try:
            proc = subprocess.run(
                cmd,
                env={**os.environ, **self._toolchain.environment},
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout_s,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            self._discard(output_path)
            raise AnalyzerError(f"cjlint timed out after {exc.timeout} seconds") from exc
        except OSError as exc:
            raise AnalyzerError(f"Failed to execute cjlint: {exc}") from exc

        if proc.returncode != 0:
            self._discard(output_path)
            self._logger.warning(
                "analyzer_failed",
                returncode=proc.returncode,
                stderr=proc.stderr[-4000:],
            )
            raise AnalyzerError(f"cjlint command failed with exit code: {proc.returncode}")

        try:
            content = output_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise AnalyzerError(f"Failed to read cjlint output: {exc}") from exc

        try:
            output_path.unlink()
        except OSError as exc:
            raise AnalyzerError(f"Failed to delete cjlint output file: {exc}") from exc

        return content

    def _discard(self, output_path: Path) -> None:
        try:
            output_path.unlink(missing_ok=True)
        except OSError as exc:
            self._logger.warning("analyzer_output_leaked", report=str(output_path), error=str(exc))
