from __future__ import annotations

import logging
from typing import Any

from .interfaces import Logger

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"


class ConsoleLogger(Logger):
    """
    Logger backed by a stdlib logger that prints to stderr.

    The stream handler is attached once per underlying logger, so building
    several drivers does not duplicate output. The shared logger's level is
    only set on that first attach, and only if nothing configured it already;
    after that each ConsoleLogger filters by its own level.
    """

    def __init__(self, level: int = logging.INFO, name: str = "docstore"):
        self._level = level
        self._logger = logging.getLogger(name)
        if not any(getattr(h, "_docstore_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._docstore_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
            if self._logger.level == logging.NOTSET:
                self._logger.setLevel(level)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def level(self) -> int:
        return self._level

    def _emit(self, level: int, msg: str, args: tuple[Any, ...]) -> None:
        if level >= self._level:
            self._logger.log(level, msg, *args)

    def fatal(self, msg: str, *args: Any) -> None:
        self._emit(logging.CRITICAL, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._emit(logging.ERROR, msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._emit(logging.WARNING, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._emit(logging.INFO, msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._emit(logging.DEBUG, msg, args)

    def trace(self, msg: str, *args: Any) -> None:
        self._emit(TRACE, msg, args)


class NullLogger(Logger):
    def fatal(self, msg: str, *args: Any) -> None:
        pass

    def error(self, msg: str, *args: Any) -> None:
        pass

    def warn(self, msg: str, *args: Any) -> None:
        pass

    def info(self, msg: str, *args: Any) -> None:
        pass

    def debug(self, msg: str, *args: Any) -> None:
        pass

    def trace(self, msg: str, *args: Any) -> None:
        pass
