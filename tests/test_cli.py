"""Tests for the filestore command line."""

import io
import sys

import pytest

from filestore.cli import EXIT_ERROR, EXIT_FALSE, EXIT_OK, main


@pytest.fixture
def base(tmp_path, monkeypatch):
    for name in ["FILESTORE_BASE_PATH", "FILESTORE_LOG_LEVEL", "FILESTORE_BACKEND"]:
        monkeypatch.delenv(name, raising=False)
    return str(tmp_path / "store")


def run(base, *argv):
    return main(["--base-path", base, *argv])


def test_write_read(base, capsys):
    assert run(base, "write", "logs", "x.log", "--data", "hello") == EXIT_OK
    assert run(base, "read", "logs", "x.log") == EXIT_OK
    assert capsys.readouterr().out == "hello"


def test_write_from_stdin(base, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))
    assert run(base, "write", "logs", "x.log") == EXIT_OK
    run(base, "read", "logs", "x.log")
    assert capsys.readouterr().out == "from stdin"


def test_touch_exists_and_ls(base, capsys):
    run(base, "write", "a", "seed.txt", "--data", "")
    assert run(base, "touch", "a", "f.txt") == EXIT_OK
    assert run(base, "exists", "a", "f.txt") == EXIT_OK
    assert run(base, "exists", "a", "g.txt") == EXIT_FALSE
    assert run(base, "ls", "a", "f") == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["true", "false", "f.txt"]


def test_rm_and_rm_recursive(base, capsys):
    run(base, "write", "a", "one.txt", "--data", "1")
    run(base, "write", "a", "two.txt", "--data", "2")
    assert run(base, "rm", "a", "one.txt") == EXIT_OK
    run(base, "ls", "a")
    assert capsys.readouterr().out.splitlines() == ["two.txt"]

    assert run(base, "rm", "-r", "a") == EXIT_OK
    assert run(base, "exists", "a", "two.txt") == EXIT_FALSE


def test_rm_without_file_name_or_recursive(base, capsys):
    assert run(base, "rm", "a") == EXIT_ERROR
    assert "rm needs FILE_NAME" in capsys.readouterr().err


def test_cp(base, tmp_path):
    run(base, "write", "logs", "x.log", "--data", "hello")
    dest = tmp_path / "backup"
    assert run(base, "cp", "logs/x.log", str(dest), "x.bak") == EXIT_OK
    assert (dest / "x.bak").read_bytes() == b"hello"


def test_os_errors_exit_with_error(base, capsys):
    assert run(base, "read", "logs", "missing.log") == EXIT_ERROR
    assert "File not found" in capsys.readouterr().err
    assert run(base, "ls", "missing") == EXIT_ERROR


def test_base_path_from_env(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FILESTORE_BASE_PATH", str(tmp_path / "env-store"))
    assert main(["write", "a", "b.txt", "--data", "x"]) == EXIT_OK
    assert (tmp_path / "env-store" / "a" / "b.txt").read_bytes() == b"x"


def test_invalid_log_level_exits_with_error(base, capsys):
    assert run(base, "--log-level", "LOUD", "ls", "a") == EXIT_ERROR
    assert "invalid configuration" in capsys.readouterr().err


def test_invalid_env_setting_exits_with_error(base, capsys, monkeypatch):
    monkeypatch.setenv("FILESTORE_BACKEND", "s3")
    assert run(base, "ls", "a") == EXIT_ERROR
    assert "invalid configuration" in capsys.readouterr().err


def test_memory_backend_rejected(base, capsys, monkeypatch):
    monkeypatch.setenv("FILESTORE_BACKEND", "memory")
    assert run(base, "write", "a", "b.txt", "--data", "x") == EXIT_ERROR
    assert "library use only" in capsys.readouterr().err
