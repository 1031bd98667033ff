from typing import Any

from autocomment.core.ports.logger import Logger


class FakeLogger(Logger):
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, message: str, **context: object) -> None:
        self._record("debug", message, context)

    def info(self, message: str, **context: object) -> None:
        self._record("info", message, context)

    def warning(self, message: str, **context: object) -> None:
        self._record("warning", message, context)

    def error(self, message: str, **context: object) -> None:
        self._record("error", message, context)

    def exception(self, message: str, **context: object) -> None:
        self._record("exception", message, context)

    def messages(self, level: str) -> list[str]:
        return [message for record_level, message, _ in self.records if record_level == level]

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, dict(context)))
