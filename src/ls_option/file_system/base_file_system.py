from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class BaseFileSystem(ABC):
    """
    Abstract base class defining the filesystem operations a listing needs.

    The listing engine never touches the disk directly; it asks an implementation
    of this interface. ``LocalFileSystem`` covers the real filesystem, and tests
    or callers with unusual storage can provide their own.

    Error contract: ``exists`` answers False for a path that is simply absent,
    including a symbolic link whose target is absent. Every other failure
    (permission denied, I/O error, symlink loop) is raised as ``OSError`` and
    the engine turns it into a ``PathAccessError``.

    Example:
        >>> class EmptyFileSystem(BaseFileSystem):
        ...     def exists(self, path: Path) -> bool:
        ...         return False
        ...     def is_file(self, path: Path) -> bool:
        ...         return False
        ...     def is_dir(self, path: Path) -> bool:
        ...         return False
        ...     def list_children(self, path: Path) -> List[Path]:
        ...         return []
        ...     def canonicalize(self, path: Path) -> Path:
        ...         return path
        >>> EmptyFileSystem().exists(Path("/anything"))
        False
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Check whether ``path`` refers to an existing entry, following symlinks.

        Args:
            path (Path): The path to check.

        Returns:
            bool: True if the entry exists, False if it is absent.

        Raises:
            OSError: If the answer cannot be determined.
        """
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check whether ``path`` is a regular file, following symlinks."""
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check whether ``path`` is a directory, following symlinks."""
        pass

    @abstractmethod
    def list_children(self, path: Path) -> List[Path]:
        """
        Enumerate the direct children of the directory ``path``.

        Implementations should return the children in a stable order and must
        not keep the directory open once they return.

        Args:
            path (Path): The directory to enumerate.

        Returns:
            List[Path]: One path per child, each joined onto ``path``.

        Raises:
            OSError: If the directory cannot be read.
        """
        pass

    @abstractmethod
    def canonicalize(self, path: Path) -> Path:
        """
        Return the absolute form of ``path`` with symlinks and ``..`` resolved.

        Raises:
            OSError: If the path cannot be resolved.
        """
        pass
