from __future__ import annotations

import contextlib
import json
import os
from pathlib import Path
from typing import Any

from pydantic_core import to_jsonable_python

from .errors import FileIOError
from .paths import TEMP_SUFFIX, ensure_dir, temp_path


def encode_json(payload: Any) -> bytes:
    """
    Encode a value the way resources are stored on disk: tab-indented JSON in
    the value's own key order, followed by a single newline.

    pydantic models are dumped in field declaration order. Values that cannot
    be encoded raise pydantic_core.PydanticSerializationError or ValueError.
    """
    doc = to_jsonable_python(payload)
    text = json.dumps(doc, indent="\t", ensure_ascii=False, allow_nan=False)
    return (text + "\n").encode("utf-8")


def atomic_write_json(
    directory: Path,
    path: Path,
    payload: Any,
    *,
    dir_mode: int = 0o755,
    file_mode: int = 0o644,
    temp_suffix: str = TEMP_SUFFIX,
) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    Readers of `path` see either the previous file or the new one, never a
    partial write. Encoding happens before anything touches the filesystem.
    """
    data = encode_json(payload)

    try:
        ensure_dir(directory, dir_mode)
    except OSError as exc:
        raise FileIOError(directory, exc) from exc

    tmp_path = temp_path(path, temp_suffix)
    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, file_mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as exc:
        _discard(tmp_path)
        raise FileIOError(tmp_path, exc) from exc

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        _discard(tmp_path)
        raise FileIOError(path, exc) from exc


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileIOError(path, exc) from exc


def _discard(tmp_path: Path) -> None:
    # best effort; the original failure is what gets reported
    with contextlib.suppress(OSError):
        tmp_path.unlink(missing_ok=True)
