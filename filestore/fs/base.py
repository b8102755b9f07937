"""Base filesystem interface."""

from abc import ABC, abstractmethod
from typing import BinaryIO


# rwxr-xr-x
DIR_MODE = 0o755
# rw-r--r--
FILE_MODE = 0o644


class Fs(ABC):
    """Abstract base class for the primitive filesystem operations.

    A ``FileStore`` composes these primitives and never touches storage any
    other way, so swapping the implementation (real disk, in-memory tree)
    swaps the storage. Failures are reported with the builtin ``OSError``
    subclasses, the same ones the ``os`` module raises.
    """

    @abstractmethod
    def create(self, path: str, mode: int = FILE_MODE) -> BinaryIO:
        """Create (or truncate) a file and return a writable binary handle.

        Args:
            path: The file path to create.
            mode: Permission bits for a newly created file.

        Returns:
            An open handle. Callers are responsible for closing it.

        Raises:
            FileNotFoundError: If the parent directory does not exist.
            IsADirectoryError: If ``path`` is a directory.
        """
        pass

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Open an existing file for reading.

        Raises:
            FileNotFoundError: If the file does not exist.
            IsADirectoryError: If ``path`` is a directory.
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a file or an empty directory.

        Raises:
            FileNotFoundError: If the path does not exist.
            OSError: If ``path`` is a directory that is not empty.
        """
        pass

    @abstractmethod
    def remove_all(self, path: str) -> None:
        """Remove a path and everything below it.

        Note:
            A missing path is not an error.
        """
        pass

    @abstractmethod
    def mkdir_all(self, path: str, mode: int = DIR_MODE) -> None:
        """Create a directory along with any missing parents.

        Note:
            An existing directory is not an error; a file in the way is.
        """
        pass

    @abstractmethod
    def read_dir(self, path: str) -> list[str]:
        """List the entry names directly under a directory, sorted by name.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If ``path`` is a file.
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return whether ``path`` exists.

        Only "not found" maps to ``False``; any other error is raised.
        """
        pass

    def read_file(self, path: str) -> bytes:
        """Read the whole content of a file."""
        with self.open(path) as f:
            return f.read()

    def write_file(self, path: str, data: bytes, mode: int = FILE_MODE) -> None:
        """Replace the whole content of a file, creating it if needed."""
        with self.create(path, mode) as f:
            f.write(data)
