from __future__ import annotations


class DocstoreError(Exception):
    """
    Base class for every error raised by the store.

    Each error exposes the path involved and the original underlying error
    (None for request-validation errors).
    """

    def __init__(self, message: str, path: str = "", original_error: BaseException | None = None):
        super().__init__(message)
        self._path = path
        self._original_error = original_error

    @property
    def path(self) -> str:
        return self._path

    @property
    def original_error(self) -> BaseException | None:
        return self._original_error


class MissingCollectionError(DocstoreError):
    def __init__(self) -> None:
        super().__init__("missing collection - no place to save record")


class MissingResourceError(DocstoreError):
    def __init__(self) -> None:
        super().__init__("missing resource - unable to save record")


class FileIOError(DocstoreError):
    def __init__(self, path: object, original_error: BaseException):
        super().__init__(f"file I/O error at path {path}: {original_error}", str(path), original_error)


class NotFoundError(DocstoreError):
    def __init__(self, path: str, original_error: BaseException | None = None):
        if original_error is None:
            original_error = FileNotFoundError(path)
        super().__init__(f"file or directory not found: {path}", path, original_error)


__all__ = [
    "DocstoreError",
    "MissingCollectionError",
    "MissingResourceError",
    "FileIOError",
    "NotFoundError",
]
