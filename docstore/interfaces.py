from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """
    Leveled logging capability injected into the driver.

    Messages use printf-style placeholders, formatted lazily:
        log.debug("Using %s (database already exists)", root)
    """

    def fatal(self, msg: str, *args: Any) -> None: ...
    def error(self, msg: str, *args: Any) -> None: ...
    def warn(self, msg: str, *args: Any) -> None: ...
    def info(self, msg: str, *args: Any) -> None: ...
    def debug(self, msg: str, *args: Any) -> None: ...
    def trace(self, msg: str, *args: Any) -> None: ...
