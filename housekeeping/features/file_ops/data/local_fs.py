import os
import errno
import logging
from pathlib import Path
from typing import List
from ..domain.interfaces import IFileSystem

logger = logging.getLogger(__name__)

class LocalFileSystem(IFileSystem):
    """
    Concrete implementation of IFileSystem on top of pathlib/os.
    One syscall per method, no retries.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def list_dir(self, path: Path) -> List[Path]:
        # Materialise the iterator so permission errors surface here, not mid-loop
        return list(path.iterdir())

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_dir(self, path: Path) -> None:
        # POSIX removes a directory link with unlink(); Windows needs rmdir()
        if path.is_symlink() and os.name != "nt":
            logger.debug(f"Removing directory link: {path}")
            path.unlink()
        else:
            path.rmdir()

    def canonicalize(self, path: Path) -> Path:
        try:
            resolved = path.resolve()
        except RuntimeError as e:
            # Older pathlib reports symlink loops as RuntimeError
            raise OSError(errno.ELOOP, str(e), str(path)) from e

        # Newer pathlib stops resolving at a loop instead of raising
        try:
            os.stat(path)
        except OSError as e:
            if e.errno == errno.ELOOP:
                raise

        if "\x00" in str(resolved):
            raise ValueError(f"Invalid file path: {path!r}")
        return resolved
