import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from housekeeping.core.common.enums import FileOperation
from ..domain.errors import FileOpError
from ..domain.models import OperationResult
from ..data.local_fs import LocalFileSystem
from .deleter import RecursiveDeleter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_fs = LocalFileSystem()

# Singleton Instance for easy import
deleter = RecursiveDeleter(_fs)


def is_filename_valid(name: Optional[PathLike]) -> bool:
    """
    Checks only whether the OS accepts the string as a path.

    The file does not have to exist. Permissions, free space and similar
    failures still have to be handled when the file is actually created.
    """
    if name is None:
        return False
    try:
        _fs.canonicalize(Path(name))
        return True
    except (OSError, ValueError, TypeError):
        return False


def list_files(directory: Optional[PathLike]) -> List[Path]:
    """
    Lists the regular files directly under a directory, in OS order.
    A missing directory (or None, or a plain file) gives an empty list.
    """
    if directory is None:
        return []

    path = Path(directory)
    if not _fs.is_dir(path):
        return []

    return [child for child in _fs.list_dir(path) if _fs.is_file(child)]


def delete_directory(directory: Optional[PathLike]) -> None:
    """Public Service API: delete a directory and everything below it."""
    deleter.delete_directory(directory)


def clean_directory(directory: Optional[PathLike]) -> None:
    """Public Service API: empty a directory without removing it."""
    deleter.clean_directory(directory)


def force_delete(target: Optional[PathLike]) -> None:
    """Public Service API: delete a file, or a directory recursively."""
    deleter.force_delete(target)


_OPERATIONS: Dict[FileOperation, Callable[[Optional[PathLike]], None]] = {
    FileOperation.FORCE_DELETE: force_delete,
    FileOperation.DELETE_DIRECTORY: delete_directory,
    FileOperation.CLEAN_DIRECTORY: clean_directory,
}


def run_operation(operation: Union[str, FileOperation], target: Optional[PathLike]) -> OperationResult:
    """
    Runs one delete operation and reports the outcome as a value instead of raising.

    Args:
        operation: "force_delete", "delete_directory" or "clean_directory".
        target: Path to operate on.

    Raises:
        ValueError: If the operation name is unknown.
    """
    op = FileOperation(operation)
    target_path = Path(target) if target is not None else None

    try:
        _OPERATIONS[op](target)
    except FileOpError as e:
        logger.debug(f"{op.value} failed on {target_path}: {e}")
        return OperationResult.failure(op, target_path, e)

    return OperationResult.success(op, target_path)
