"""Tests for logging setup."""

import logging

from filestore import FileStore, InMemoryFs
from filestore.logger import ROOT_LOGGER_NAME, get_logger, setup_logging


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_get_logger_is_under_package_root():
    logger = get_logger("filestore.something")
    assert logger.name == "filestore.something"
    assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)


def test_setup_logging_sets_level_and_single_handler():
    root = setup_logging("debug")
    handlers = list(root.handlers)
    assert root.level == logging.DEBUG

    setup_logging("WARNING")
    assert root.level == logging.WARNING
    assert root.handlers == handlers


def test_store_operations_log_at_debug():
    root = setup_logging("DEBUG")
    handler = _ListHandler()
    root.addHandler(handler)
    try:
        store = FileStore("/data", fs=InMemoryFs())
        store.write("logs", "x.log", b"hello")
        store.delete("logs", "x.log")
    finally:
        root.removeHandler(handler)
        setup_logging("INFO")

    assert "Wrote 5 bytes to /data/logs/x.log" in handler.messages
    assert "Removed file: /data/logs/x.log" in handler.messages


def test_records_propagate_to_application_handlers(caplog):
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    store = FileStore("/data", fs=InMemoryFs())
    store.write("logs", "x.log", b"hi")

    assert "Wrote 2 bytes to /data/logs/x.log" in caplog.messages


def test_import_attaches_only_a_null_handler_until_setup():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in root.handlers)
    assert root.propagate is True
