"""Base-path scoped file storage over a pluggable filesystem."""

from importlib.metadata import PackageNotFoundError, version

from filestore.config import FileStoreConfig
from filestore.exceptions import FileNotFoundInStoreError, FileStoreError
from filestore.fs import DIR_MODE, FILE_MODE, Fs, InMemoryFs, LocalFs
from filestore.logger import get_logger
from filestore.store import FileStore


try:
    __version__ = version("filestore")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "FileStore",
    "FileStoreConfig",
    "FileStoreError",
    "FileNotFoundInStoreError",
    "Fs",
    "LocalFs",
    "InMemoryFs",
    "DIR_MODE",
    "FILE_MODE",
    "get_logger",
    "__version__",
]
