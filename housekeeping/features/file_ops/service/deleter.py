import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.interfaces import IFileSystem
from ..domain.errors import (
    FileOpError,
    InvalidArgumentError,
    NotFoundError,
    ListingFailedError,
    DeleteFailedError,
)
from ..data.local_fs import LocalFileSystem

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

class RecursiveDeleter:
    """
    Removes files and whole directory trees.

    force_delete -> delete_directory -> clean_directory -> force_delete (per child).
    Cleaning never stops on the first failure: every child is attempted and
    only the last error seen is raised at the end.
    """

    def __init__(self, fs: Optional[IFileSystem] = None):
        self.fs = fs or LocalFileSystem()

    def force_delete(self, target: Optional[PathLike]) -> None:
        """
        Deletes a file, or a directory with everything below it.

        Raises:
            NotFoundError: If a non-directory target does not exist.
            DeleteFailedError: If the OS refuses the delete.
        """
        if target is None:
            return

        path = Path(target)

        if self.fs.is_dir(path):
            self.delete_directory(path)
            return

        present = self.fs.exists(path) or self.fs.is_symlink(path)
        try:
            self.fs.remove_file(path)
        except OSError as e:
            if not present:
                raise NotFoundError(f"File does not exist: {path}", path) from e
            raise DeleteFailedError(f"Unable to delete file {path}", path) from e

        logger.debug(f"Deleted file: {path}")

    def delete_directory(self, directory: Optional[PathLike]) -> None:
        """
        Deletes a directory recursively. A missing directory is a no-op.
        A symbolic link to a directory is removed as a link, never followed.

        Raises:
            InvalidArgumentError: If the path exists but is not a directory.
            DeleteFailedError: If the directory entry itself cannot be removed.
                A cleaning failure, if any, is attached as __cause__.
            FileOpError: The cleaning failure, if the entry was removed anyway.
        """
        if directory is None:
            return

        path = Path(directory)

        if not self.fs.exists(path):
            return

        clean_error: Optional[FileOpError] = None
        if not self.fs.is_symlink(path):
            try:
                self.clean_directory(path)
            except InvalidArgumentError:
                raise
            except FileOpError as e:
                clean_error = e

        try:
            self.fs.remove_dir(path)
        except OSError as e:
            message = f"Unable to delete directory {path}."
            # The removal failure is what the caller sees; the child failure rides along as the cause
            raise DeleteFailedError(message, path) from (clean_error or e)

        if clean_error is not None:
            raise clean_error

        logger.debug(f"Deleted directory: {path}")

    def clean_directory(self, directory: Optional[PathLike]) -> None:
        """
        Deletes everything inside a directory but keeps the directory.

        Raises:
            InvalidArgumentError: If the directory is missing or not a directory.
            ListingFailedError: If its contents cannot be listed.
            FileOpError: The last child failure, after every child was attempted.
        """
        # 1. Preconditions
        if directory is None:
            raise InvalidArgumentError("None does not exist")

        path = Path(directory)
        if not self.fs.exists(path):
            raise InvalidArgumentError(f"{path} does not exist", path)

        if not self.fs.is_dir(path):
            raise InvalidArgumentError(f"{path} is not a directory", path)

        # 2. Snapshot the children
        try:
            children = self.fs.list_dir(path)
        except OSError as e:
            raise ListingFailedError(f"Failed to list content of {path}", path) from e

        # 3. Attempt every child, remember only the most recent failure
        last_error: Optional[FileOpError] = None
        for child in children:
            try:
                self.force_delete(child)
            except FileOpError as e:
                logger.warning(f"Could not delete {child}: {e}")
                last_error = e

        if last_error is not None:
            raise last_error
