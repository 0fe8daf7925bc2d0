from __future__ import annotations

import functools
import os
import shutil
from pathlib import Path
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter

from .errors import FileIOError, MissingCollectionError, MissingResourceError, NotFoundError
from .json_store import atomic_write_json, read_bytes
from .locks import CollectionLockRegistry
from .paths import clean_root, collection_dir, delete_target, ensure_dir, logical_path, resource_path
from .settings import Options

T = TypeVar("T")


class Driver:
    """
    Filesystem-backed JSON document store.

    Layout on disk is <root>/<collection>/<resource>.json. Writes and deletes
    are serialized per collection; reads take no lock and rely on atomic
    renames to never observe a partially written file.
    """

    def __init__(self, root: str | os.PathLike[str], options: Options | None = None):
        opts = options if options is not None else Options()
        self._root = clean_root(root)
        self._options = opts
        self._log = opts.resolved_logger()
        self._locks = CollectionLockRegistry()

        if self._root.exists():
            self._log.debug("Using '%s' (database already exists)", self._root)
            return

        self._log.debug("Creating database at '%s'...", self._root)
        try:
            ensure_dir(self._root, opts.dir_mode)
        except OSError as exc:
            self._log.error("Failed to create database at '%s': %s", self._root, exc)
            raise FileIOError(self._root, exc) from exc

    @property
    def root(self) -> Path:
        return self._root

    @property
    def options(self) -> Options:
        return self._options

    def write(self, collection: str, resource: str, value: Any) -> None:
        _require_collection(collection)
        _require_resource(resource)

        with self._locks.lock_for(collection):
            directory = collection_dir(self._root, collection)
            path = resource_path(self._root, collection, resource)
            try:
                atomic_write_json(
                    directory,
                    path,
                    value,
                    dir_mode=self._options.dir_mode,
                    file_mode=self._options.file_mode,
                    temp_suffix=self._options.temp_suffix,
                )
            except FileIOError as exc:
                self._log.error("Write %s/%s failed: %s", collection, resource, exc)
                raise
            self._log.trace("Wrote %s", path)

    @overload
    def read(self, collection: str, resource: str) -> Any: ...

    @overload
    def read(self, collection: str, resource: str, model: type[T]) -> T: ...

    def read(self, collection: str, resource: str, model: Any = Any) -> Any:
        """
        Read a resource and validate it into `model` (any type pydantic can
        validate: a BaseModel subclass, a dataclass, dict[str, int], ...).

        Missing files raise FileIOError; malformed content raises
        pydantic.ValidationError unchanged.
        """
        _require_collection(collection)
        _require_resource(resource)

        raw = read_bytes(resource_path(self._root, collection, resource))
        return _adapter(model).validate_json(raw)

    def read_all(self, collection: str) -> list[bytes]:
        """
        Return the raw bytes of every resource in a collection.

        Entries come back in sorted file-name order. Decoding is left to the
        caller. One unreadable entry fails the whole call.
        """
        _require_collection(collection)

        directory = collection_dir(self._root, collection)
        try:
            names = sorted(os.listdir(directory))
        except OSError as exc:
            raise FileIOError(directory, exc) from exc

        suffix = self._options.temp_suffix
        return [read_bytes(directory / name) for name in names if not name.endswith(suffix)]

    def delete(self, collection: str, resource: str = "") -> None:
        """
        Delete one resource, or the whole collection when `resource` is empty.

        Raises NotFoundError (path "<collection>/<resource>") when neither the
        bare path nor its ".json" form exists.
        """
        _require_collection(collection)

        with self._locks.lock_for(collection):
            target = delete_target(self._root, collection, resource)
            if target is None:
                raise NotFoundError(logical_path(collection, resource))

            try:
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink()
            except OSError as exc:
                self._log.error("Delete %s failed: %s", target, exc)
                raise FileIOError(target, exc) from exc
            self._log.trace("Deleted %s", target)


def new(root: str | os.PathLike[str], options: Options | None = None) -> Driver:
    """Open the store at `root`, creating the directory if it does not exist."""
    return Driver(root, options)


@functools.lru_cache(maxsize=128)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _require_collection(collection: str) -> None:
    if not collection:
        raise MissingCollectionError()


def _require_resource(resource: str) -> None:
    if not resource:
        raise MissingResourceError()
