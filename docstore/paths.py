from __future__ import annotations

import os
from pathlib import Path

JSON_SUFFIX = ".json"
TEMP_SUFFIX = ".tmp"


def clean_root(root: str | os.PathLike[str]) -> Path:
    # absolute and normalized, but symlinks are left alone
    return Path(os.path.abspath(os.fspath(root)))


def ensure_dir(path: Path, mode: int = 0o755) -> Path:
    path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path


def collection_dir(root: Path, collection: str) -> Path:
    return root / collection


def resource_path(root: Path, collection: str, resource: str) -> Path:
    return collection_dir(root, collection) / f"{resource}{JSON_SUFFIX}"


def temp_path(path: Path, suffix: str = TEMP_SUFFIX) -> Path:
    return path.with_name(path.name + suffix)


def logical_path(collection: str, resource: str = "") -> str:
    """
    Root-relative name of a delete target, as reported in NotFoundError.

    ("fish", "ghost") -> "fish/ghost"; ("fish", "") -> "fish".
    """
    return f"{collection}/{resource}" if resource else collection


def delete_target(root: Path, collection: str, resource: str = "") -> Path | None:
    """
    Resolve what a delete should remove.

    An empty resource targets the whole collection directory. Otherwise the
    bare path is probed first, then the same path with ".json" appended.
    Returns None when neither form exists.
    """
    bare = collection_dir(root, collection) / resource if resource else collection_dir(root, collection)
    if bare.exists():
        return bare
    if resource:
        as_json = bare.with_name(bare.name + JSON_SUFFIX)
        if as_json.exists():
            return as_json
    return None
