"""In-memory filesystem implementation."""

import errno
import io
import os
import posixpath
import threading
from collections.abc import Callable
from typing import BinaryIO

from .base import DIR_MODE, FILE_MODE, Fs


def _error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class _MemoryFile(io.BytesIO):
    """Write handle that publishes its buffer to the tree on flush and close."""

    def __init__(self, commit: Callable[[bytes], None]):
        super().__init__()
        self._commit = commit

    def flush(self) -> None:
        super().flush()
        if not self.closed:
            self._commit(self.getvalue())

    def close(self) -> None:
        if not self.closed:
            self._commit(self.getvalue())
        super().close()


class InMemoryFs(Fs):
    """``Fs`` implementation that keeps the whole tree in process memory.

    Meant for tests: it follows the error behavior of ``LocalFs`` closely
    enough that a ``FileStore`` cannot tell the two apart. Paths are
    normalized to absolute POSIX form, so ``"data"`` and ``"/data"`` name the
    same directory. Every primitive holds a lock, so individual calls are safe
    from multiple threads.

    Attributes:
        files: File contents keyed by normalized path.
        dirs: Directory permission bits keyed by normalized path.
        modes: File permission bits keyed by normalized path.
    """

    files: dict[str, bytes]
    dirs: dict[str, int]
    modes: dict[str, int]

    def __init__(self):
        self.files = {}
        self.modes = {}
        self.dirs = {"/": DIR_MODE}
        self._lock = threading.RLock()

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(posixpath.join("/", path))

    def _check_parent(self, path: str) -> None:
        parent = posixpath.dirname(path)
        if parent in self.dirs:
            return
        if parent in self.files:
            raise _error(NotADirectoryError, errno.ENOTDIR, path)
        raise _error(FileNotFoundError, errno.ENOENT, path)

    def create(self, path: str, mode: int = FILE_MODE) -> BinaryIO:
        path = self._norm(path)
        with self._lock:
            if path in self.dirs:
                raise _error(IsADirectoryError, errno.EISDIR, path)
            self._check_parent(path)
            self.files[path] = b""
            self.modes.setdefault(path, mode)

        def commit(data: bytes) -> None:
            # A file removed while its handle is open stays removed.
            with self._lock:
                if path in self.files and posixpath.dirname(path) in self.dirs:
                    self.files[path] = data

        return _MemoryFile(commit)

    def open(self, path: str) -> BinaryIO:
        path = self._norm(path)
        with self._lock:
            if path in self.dirs:
                raise _error(IsADirectoryError, errno.EISDIR, path)
            if path not in self.files:
                raise _error(FileNotFoundError, errno.ENOENT, path)
            return io.BytesIO(self.files[path])

    def remove(self, path: str) -> None:
        path = self._norm(path)
        with self._lock:
            if path in self.files:
                del self.files[path]
                self.modes.pop(path, None)
                return
            if path not in self.dirs:
                raise _error(FileNotFoundError, errno.ENOENT, path)
            if path == "/":
                raise _error(OSError, errno.EBUSY, path)
            if self._children(path):
                raise _error(OSError, errno.ENOTEMPTY, path)
            del self.dirs[path]

    def remove_all(self, path: str) -> None:
        path = self._norm(path)
        prefix = path.rstrip("/") + "/"
        with self._lock:
            for name in [p for p in self.files if p == path or p.startswith(prefix)]:
                del self.files[name]
                self.modes.pop(name, None)
            for name in [p for p in self.dirs if p == path or p.startswith(prefix)]:
                if name != "/":
                    del self.dirs[name]

    def mkdir_all(self, path: str, mode: int = DIR_MODE) -> None:
        path = self._norm(path)
        with self._lock:
            if path in self.dirs:
                return
            if path in self.files:
                raise _error(FileExistsError, errno.EEXIST, path)
            current = "/"
            for part in path.strip("/").split("/"):
                current = posixpath.join(current, part)
                if current in self.files:
                    raise _error(NotADirectoryError, errno.ENOTDIR, path)
                self.dirs.setdefault(current, mode)

    def read_dir(self, path: str) -> list[str]:
        path = self._norm(path)
        with self._lock:
            if path in self.files:
                raise _error(NotADirectoryError, errno.ENOTDIR, path)
            if path not in self.dirs:
                raise _error(FileNotFoundError, errno.ENOENT, path)
            return sorted(self._children(path))

    def exists(self, path: str) -> bool:
        path = self._norm(path)
        with self._lock:
            if path in self.files or path in self.dirs:
                return True
            parent = posixpath.dirname(path)
            while parent != "/":
                if parent in self.files:
                    raise _error(NotADirectoryError, errno.ENOTDIR, path)
                parent = posixpath.dirname(parent)
            return False

    def _children(self, path: str) -> list[str]:
        return [
            posixpath.basename(p)
            for p in (*self.files, *self.dirs)
            if p != "/" and posixpath.dirname(p) == path
        ]
