"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def _frozen_day(monkeypatch, tmp_path):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240301"),
    )


def test_builder_writes_usage_log_under_dated_file(tmp_path, monkeypatch):
    """Usage logs land in logs/usage with a dated file name."""
    _frozen_day(monkeypatch, tmp_path)

    usage = (
        logger_module.LoggerBuilder()
        .name("test.usage.file")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .build()
    )

    handlers = usage.handlers
    assert len(handlers) == 1
    assert handlers[0].baseFilename == str(
        tmp_path / "logs" / "usage" / "20240301_usage_logs.log"
    )
    assert usage.propagate is False


def test_builder_does_not_duplicate_handlers(tmp_path, monkeypatch):
    """Building the same name twice keeps a single set of handlers."""
    _frozen_day(monkeypatch, tmp_path)
    builder = (
        logger_module.LoggerBuilder()
        .name("test.app.reuse")
        .level(logging.WARNING)
    )

    first = builder.build()
    second = builder.build()

    assert first is second
    assert first.level == logging.WARNING
    assert len(first.handlers) == 2


def test_custom_handler_factories_are_used(tmp_path, monkeypatch):
    """Injected factories replace the default handlers."""
    _frozen_day(monkeypatch, tmp_path)
    file_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, fmt):
        seen["path"] = path
        seen["fmt"] = fmt
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("test.custom.factories")
        .console(False)
        .formatter(lambda: logging.Formatter("%(message)s"))
        .file_handler(_file_factory)
        .build()
    )

    assert built.handlers == [file_handler]
    assert seen["path"].parent == tmp_path / "logs" / "app"
    assert seen["fmt"]._fmt == "%(message)s"


def test_default_handlers_log_info_with_formatter(tmp_path):
    """Default handlers log from INFO upwards with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()

    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "treasury.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    for handler in (file_handler, console_handler):
        assert handler.level == logging.INFO
        assert handler.formatter is fmt
    assert isinstance(file_handler, logging.FileHandler)
    file_handler.close()


def test_app_logger_delegates_and_is_singleton(monkeypatch):
    """AppLogger forwards every level to the built logger."""
    built = MagicMock()
    monkeypatch.setattr(logger_module.LoggerBuilder, "build", lambda self: built)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    app_logger.info("synced")
    app_logger.warning("offline")
    app_logger.error("failed")
    app_logger.debug("payload")
    app_logger.critical("down")

    built.info.assert_called_with("synced")
    built.warning.assert_called_with("offline")
    built.error.assert_called_with("failed")
    built.debug.assert_called_with("payload")
    built.critical.assert_called_with("down")
    assert logger_module.get_app_logger() is app_logger


def test_usage_logger_is_separate_from_app_logger(monkeypatch):
    """Usage and app loggers are distinct singletons with their own folders."""
    subdirs = []

    def _build(self):
        subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage = logger_module.get_usage_logger()
    app = logger_module.get_app_logger()

    assert usage is not app
    assert logger_module.get_usage_logger() is usage
    assert subdirs == ["usage", "app"]
