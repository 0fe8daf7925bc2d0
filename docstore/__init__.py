from __future__ import annotations

from .driver import Driver, new
from .errors import (
    DocstoreError,
    FileIOError,
    MissingCollectionError,
    MissingResourceError,
    NotFoundError,
)
from .interfaces import Logger
from .log import TRACE, ConsoleLogger, NullLogger
from .settings import Options

__all__ = [
    "Driver",
    "new",
    "Options",
    "Logger",
    "ConsoleLogger",
    "NullLogger",
    "TRACE",
    "DocstoreError",
    "FileIOError",
    "MissingCollectionError",
    "MissingResourceError",
    "NotFoundError",
]
