from __future__ import annotations

import logging
from pathlib import Path

from dependency_injector.resources import Resource

from .handlers import build_console_handler, build_json_file_handler


class AnalysisLogger(Resource):
    """Structured logger for the analysis pipeline.

    Keyword arguments given to the log methods become structured fields of
    the record. Handlers are attached on init and closed on shutdown.
    """

    def init(
        self,
        *,
        logger_name: str = "cjlint_refresh",
        level: str = "INFO",
        console_output: bool = True,
        json_console: bool = False,
        log_file: Path | None = None,
    ) -> "AnalysisLogger":
        """Initialize handlers.

        Args:
            logger_name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            console_output: Whether to log to stderr
            json_console: Emit JSON lines on stderr instead of plain text
            log_file: Optional JSONL file that receives every record

        Returns:
            Self for dependency_injector Resource pattern
        """
        numeric = getattr(logging, level.upper())
        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(numeric)
        self._logger.propagate = False

        self._logger.handlers.clear()
        self._handlers: list[logging.Handler] = []

        if log_file is not None:
            self._add(build_json_file_handler(log_file, level=numeric))

        if console_output:
            self._add(build_console_handler(level=numeric, json_format=json_console))

        return self

    def _add(self, handler: logging.Handler) -> None:
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def shutdown(self, resource: "AnalysisLogger") -> None:
        """Flush and close handlers so log files are released."""
        for handler in self._handlers:
            handler.flush()
            handler.close()
        self._logger.handlers.clear()

    def debug(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.debug(message, extra=kwargs)
        else:
            self._logger.debug(message)

    def info(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.info(message, extra=kwargs)
        else:
            self._logger.info(message)

    def warning(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.warning(message, extra=kwargs)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        if kwargs:
            self._logger.error(message, extra=kwargs, exc_info=exc_info)
        else:
            self._logger.error(message, exc_info=exc_info)

    def exception(self, message: str, **kwargs) -> None:
        if kwargs:
            self._logger.exception(message, extra=kwargs)
        else:
            self._logger.exception(message)
