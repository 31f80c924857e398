"""Shared fakes for infra tests."""


class RecordingLogger:
    def __init__(self):
        self.records: list[tuple[str, str, dict]] = []

    def _add(self, level: str, message: str, kwargs: dict) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs) -> None:
        self._add("debug", message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._add("info", message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._add("warning", message, kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self._add("error", message, kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._add("exception", message, kwargs)

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m, _ in self.records if level is None or lvl == level]


class FixedNames:
    """Name generator returning a scripted sequence."""

    def __init__(self, *names: str):
        self._names = list(names)

    def generate(self) -> str:
        return self._names.pop(0)
