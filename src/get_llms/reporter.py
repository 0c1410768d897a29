"""Leveled diagnostics handed to the resolver instead of a global logger."""

from __future__ import annotations

from typing import Protocol

from loguru import logger


class Reporter(Protocol):
    """Protocol for diagnostic sinks used by the resolution cascade."""

    def debug(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoguruReporter:
    """Forward messages to a bound loguru logger."""

    def __init__(self, **context: str):
        self._logger = logger.bind(**context)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


class NullReporter:
    """Discard everything."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
