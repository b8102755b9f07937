"""Filesystem interfaces and implementations."""

from .base import DIR_MODE, FILE_MODE, Fs
from .local import LocalFs
from .memory import InMemoryFs


__all__ = ["Fs", "LocalFs", "InMemoryFs", "DIR_MODE", "FILE_MODE"]
