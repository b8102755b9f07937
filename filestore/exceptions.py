"""Exceptions for the filestore package."""


class FileStoreError(Exception):
    """Base class for errors raised by the file store itself."""

    pass


class FileNotFoundInStoreError(FileNotFoundError, FileStoreError):
    """Raised by ``FileStore.read`` when the target file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")
