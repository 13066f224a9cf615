from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

class IFileSystem(ABC):
    """
    Contract for the OS filesystem calls the deleter orchestrates.
    Every method acts on a single entry; none of them recurse.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """True if the path resolves to an existing entry (links are followed)."""
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """True if the path resolves to a directory (links are followed)."""
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """True if the path resolves to a regular file (links are followed)."""
        pass

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        """True if the entry itself is a symbolic link."""
        pass

    @abstractmethod
    def list_dir(self, path: Path) -> List[Path]:
        """
        Snapshot of the immediate children of a directory.

        Raises:
            OSError: If the OS refuses to enumerate the directory.
        """
        pass

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        """
        Removes a single non-directory entry (file or link).

        Raises:
            FileNotFoundError: If the entry does not exist.
            OSError: For any other failure.
        """
        pass

    @abstractmethod
    def remove_dir(self, path: Path) -> None:
        """
        Removes an empty directory entry, or a link pointing to a directory.

        Raises:
            OSError: If the entry cannot be removed.
        """
        pass

    @abstractmethod
    def canonicalize(self, path: Path) -> Path:
        """
        Resolves a path to its absolute, normalised form without requiring it to exist.

        Raises:
            OSError, ValueError: If the OS path resolver rejects the string.
        """
        pass
