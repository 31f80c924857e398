from __future__ import annotations

import logging
from logging import Handler
from pathlib import Path

from .formatters import JSONFormatter, HumanReadableFormatter


def build_json_file_handler(path: Path, level: int = logging.INFO) -> Handler:
    """Create an appending JSONL file handler."""
    path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.FileHandler(path, encoding="utf-8", mode="a")
    h.setLevel(level)
    h.setFormatter(JSONFormatter())
    return h


def build_console_handler(level: int = logging.INFO, *, json_format: bool = False) -> Handler:
    """Create a stderr handler, JSON lines or human-readable."""
    h = logging.StreamHandler()
    h.setLevel(level)
    h.setFormatter(JSONFormatter() if json_format else HumanReadableFormatter())
    return h
