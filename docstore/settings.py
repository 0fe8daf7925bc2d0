from __future__ import annotations

from dataclasses import dataclass

from .interfaces import Logger
from .log import ConsoleLogger
from .paths import TEMP_SUFFIX


@dataclass(frozen=True)
class Options:
    # Logging (None -> console logger at info level)
    logger: Logger | None = None

    # Permissions for created directories and resource files
    dir_mode: int = 0o755
    file_mode: int = 0o644

    # Suffix of the sibling file written before the atomic rename
    temp_suffix: str = TEMP_SUFFIX

    def resolved_logger(self) -> Logger:
        return self.logger if self.logger is not None else ConsoleLogger()

    def __post_init__(self) -> None:
        if not self.temp_suffix or self.temp_suffix == ".json":
            raise ValueError("temp_suffix must be non-empty and differ from '.json'")
