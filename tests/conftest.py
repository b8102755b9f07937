"""Common test fixtures and utilities."""

import pytest

from filestore import FileStore, InMemoryFs, LocalFs


@pytest.fixture(params=["local", "memory"])
def fs_and_root(request, tmp_path):
    """Yield a filesystem implementation and a base path that suits it."""
    if request.param == "local":
        return LocalFs(), str(tmp_path / "root")
    return InMemoryFs(), "/root"


@pytest.fixture
def store(fs_and_root):
    """Create a FileStore on each filesystem implementation."""
    fs, root = fs_and_root
    return FileStore(root, fs=fs)


@pytest.fixture
def memory_store():
    """Create a FileStore backed by a fresh InMemoryFs."""
    return FileStore("/data", fs=InMemoryFs())
