"""Local filesystem implementation."""

import os
import shutil
from typing import BinaryIO

from .base import DIR_MODE, FILE_MODE, Fs


class LocalFs(Fs):
    """``Fs`` implementation backed by the operating system's filesystem.

    Paths are handed to ``os`` as given, so relative paths resolve against the
    process working directory.
    """

    def create(self, path: str, mode: int = FILE_MODE) -> BinaryIO:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        return os.fdopen(fd, "wb")

    def open(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def remove(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)

    def remove_all(self, path: str) -> None:
        if not os.path.lexists(path):
            return
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)

    def mkdir_all(self, path: str, mode: int = DIR_MODE) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)

    def read_dir(self, path: str) -> list[str]:
        return sorted(os.listdir(path))

    def exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return True
