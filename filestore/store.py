"""Base-path scoped file store."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING

from filestore.exceptions import FileNotFoundInStoreError
from filestore.fs import DIR_MODE, FILE_MODE, Fs, LocalFs
from filestore.logger import get_logger


if TYPE_CHECKING:
    from filestore.config import FileStoreConfig


logger = get_logger(__name__)


class FileStore:
    """Create, read, write, delete, list and copy files under a base path.

    Every operation addresses a file as a ``(sub_dir, file_name)`` pair that is
    joined onto ``base_path`` before the filesystem is touched. Leading slashes
    are stripped from each part, so ``"/logs"`` names the same directory as
    ``"logs"``. ``..`` segments are not guarded against.

    Errors raised by the filesystem are passed through unchanged. The only
    error the store synthesizes is ``FileNotFoundInStoreError`` from ``read``.

    Attributes:
        fs: The filesystem implementation all I/O goes through.
        base_path: The root directory for all operations.
    """

    fs: Fs
    base_path: str

    def __init__(self, base_path: str, fs: Fs | None = None):
        """Initialize the store and make sure the base directory exists.

        Args:
            base_path: The root directory. Supports tilde expansion
                (e.g., "~/data"). Missing directories are created.
            fs: The filesystem implementation. Defaults to ``LocalFs``.

        Raises:
            OSError: If the base directory cannot be created.
        """
        if base_path.startswith("~"):
            base_path = os.path.expanduser(base_path)
        self.fs = fs if fs is not None else LocalFs()
        self.base_path = base_path
        try:
            self.fs.mkdir_all(self.base_path, DIR_MODE)
        except OSError as e:
            logger.error(f"Could not create base path {self.base_path}: {e}")
            raise

    @classmethod
    def from_config(cls, config: FileStoreConfig) -> FileStore:
        """Build a store from a ``FileStoreConfig``."""
        return cls(config.base_path, fs=config.create_fs())

    def path_for(self, sub_dir: str, file_name: str = "") -> str:
        """Return the effective path for ``sub_dir`` and ``file_name``.

        Leading slashes are stripped from both parts so they always resolve
        below ``base_path``.
        """
        parts = [p.lstrip("/") for p in (sub_dir, file_name) if p]
        return os.path.join(self.base_path, *parts)

    def create_file(self, sub_dir: str, file_name: str) -> None:
        """Make sure an empty file exists, leaving an existing one untouched.

        The sub directory is not created; it must already exist.

        Raises:
            OSError: If the file cannot be created.
        """
        path = self.path_for(sub_dir, file_name)
        if self.fs.exists(path):
            return
        with self.fs.create(path, FILE_MODE):
            pass
        logger.debug(f"Created file: {path}")

    def write(self, sub_dir: str, file_name: str, data: bytes | str) -> None:
        """Replace the content of a file, creating the sub directory if needed.

        Args:
            sub_dir: The sub directory under the base path.
            file_name: The file name inside ``sub_dir``.
            data: The full new content. Strings are encoded as UTF-8.

        Raises:
            OSError: If the directory or the file cannot be written.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.fs.mkdir_all(self.path_for(sub_dir), DIR_MODE)
        path = self.path_for(sub_dir, file_name)
        self.fs.write_file(path, data, FILE_MODE)
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    def read(self, sub_dir: str, file_name: str) -> bytes:
        """Return the full content of a file.

        The existence check and the read are separate calls, so a file removed
        in between surfaces as the filesystem's own ``FileNotFoundError``.

        Raises:
            FileNotFoundInStoreError: If the file does not exist.
            OSError: If the file cannot be read.
        """
        path = self.path_for(sub_dir, file_name)
        if not self.fs.exists(path):
            raise FileNotFoundInStoreError(path)
        return self.fs.read_file(path)

    def delete(self, sub_dir: str, file_name: str) -> None:
        """Remove a single file.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file cannot be removed.
        """
        path = self.path_for(sub_dir, file_name)
        self.fs.remove(path)
        logger.debug(f"Removed file: {path}")

    def delete_all(self, sub_dir: str) -> None:
        """Remove a sub directory and everything in it. Missing is fine."""
        path = self.path_for(sub_dir)
        self.fs.remove_all(path)
        logger.debug(f"Removed directory: {path}")

    def exists(self, sub_dir: str, file_name: str) -> bool:
        """Return whether the file exists. Errors other than not-found raise."""
        return self.fs.exists(self.path_for(sub_dir, file_name))

    def list_files(self, sub_dir: str, partial_name: str = "") -> list[str]:
        """List entry names under ``sub_dir`` that contain ``partial_name``.

        Matching is a case-sensitive substring test; an empty ``partial_name``
        matches everything. Order follows the filesystem's listing.

        Raises:
            FileNotFoundError: If ``sub_dir`` does not exist.
            OSError: If the directory cannot be read.
        """
        names = self.fs.read_dir(self.path_for(sub_dir))
        return [name for name in names if partial_name in name]

    def copy_file(self, src_file: str, dest_dir: str, new_file_name: str) -> None:
        """Copy a file from the store to ``dest_dir/new_file_name``.

        Note:
            ``src_file`` is relative to the base path, but ``dest_dir`` is
            used exactly as given and is NOT joined onto the base path. Pass
            a full path (e.g. ``os.path.join(store.base_path, "backup")``) to
            copy within the store.

        Raises:
            OSError: If the destination directory cannot be created, the
                source cannot be opened, or the copy fails. A failure after
                the destination was created leaves it partially written.
        """
        src_path = self.path_for(src_file)
        self.fs.mkdir_all(dest_dir, DIR_MODE)
        dest_path = os.path.join(dest_dir, new_file_name)
        with self.fs.open(src_path) as src:
            with self.fs.create(dest_path, FILE_MODE) as dest:
                shutil.copyfileobj(src, dest)
        logger.debug(f"Copied {src_path} -> {dest_path}")
