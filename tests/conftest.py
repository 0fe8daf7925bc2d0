from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from docstore import Driver, NullLogger, Options  # noqa: E402


class RecordingLogger:
    """Collects (level, formatted message) pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, msg: str, args: tuple[Any, ...]) -> None:
        self.records.append((level, msg % args if args else msg))

    def fatal(self, msg: str, *args: Any) -> None:
        self._record("fatal", msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._record("error", msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._record("warn", msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._record("info", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._record("debug", msg, args)

    def trace(self, msg: str, *args: Any) -> None:
        self._record("trace", msg, args)

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def db_root(tmp_path: Path) -> Path:
    """A database root that does not exist yet ("deep/school" under tmp)."""
    return tmp_path / "deep" / "school"


@pytest.fixture
def db(db_root: Path) -> Driver:
    return Driver(db_root, Options(logger=NullLogger()))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
