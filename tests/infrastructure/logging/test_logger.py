"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from freelance_books.infrastructure.logging import logger as logger_module


def _stub_log_location(monkeypatch, tmp_path):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240615"),
    )


def test_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """Built loggers should log to logs/<subdir>/<stamp>_<prefix>.log."""
    _stub_log_location(monkeypatch, tmp_path)

    builder = (
        logger_module.LoggerBuilder()
        .name("freelance_books.test.imports")
        .subdir("imports")
        .prefix("import_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    handler = built.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "imports" / "20240615_import_logs.log"
    assert handler.baseFilename == str(expected)
    assert builder.build() is built
    assert len(built.handlers) == 1

    for attached in list(built.handlers):
        attached.close()
        built.removeHandler(attached)


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honored."""
    _stub_log_location(monkeypatch, tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("freelance_books.test.custom")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]

    for attached in list(built.handlers):
        built.removeHandler(attached)


def test_default_handlers_log_at_info(tmp_path):
    """Default handlers should apply the formatter at INFO level."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_calls(monkeypatch):
    """The singleton wrapper should forward every level to the logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("freelance_books.test")
    wrapper.info("computed")
    wrapper.warning("missing rate")
    wrapper.error("insert failed")
    wrapper.debug("row")
    wrapper.critical("stop")

    fake_logger.info.assert_called_with("computed")
    fake_logger.warning.assert_called_with("missing rate")
    fake_logger.error.assert_called_with("insert failed")
    fake_logger.debug.assert_called_with("row")
    fake_logger.critical.assert_called_with("stop")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """App and usage loggers should each be built once per process."""
    built_prefixes = []

    def _fake_build(self):
        built_prefixes.append(self._prefix)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_prefixes == ["app_logs", "usage_logs"]
