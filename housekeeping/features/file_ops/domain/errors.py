from pathlib import Path
from typing import Optional, Union
from housekeeping.core.common.enums import ErrorKind

PathLike = Union[str, Path]

class FileOpError(Exception):
    """
    Base class for every failure raised by the file operations feature.
    Carries the error kind and the offending path so callers can react
    without parsing messages.
    """
    kind: ErrorKind

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None

class InvalidArgumentError(FileOpError, ValueError):
    """The path cannot be operated on as requested (missing, or wrong type)."""
    kind = ErrorKind.INVALID_ARGUMENT

class NotFoundError(FileOpError):
    """A file expected to exist for a direct delete no longer does."""
    kind = ErrorKind.NOT_FOUND

class ListingFailedError(FileOpError):
    """The OS could not produce a directory listing."""
    kind = ErrorKind.LISTING_FAILED

class DeleteFailedError(FileOpError):
    """An OS-level delete of a file or empty directory failed."""
    kind = ErrorKind.DELETE_FAILED
