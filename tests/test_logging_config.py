from __future__ import annotations

import logging

import pytest

from arcade_locales.core.logging_config import ColoredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(restore_root_logger):
    setup_logging(log_file=False, debug=False)
    root = restore_root_logger
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)


def test_file_handler_written(restore_root_logger, tmp_path):
    setup_logging(log_file=True, debug=True, log_dir=tmp_path)
    assert restore_root_logger.level == logging.DEBUG
    assert logging.getLogger("arcade_locales").level == logging.DEBUG
    logging.getLogger("arcade_locales.test").info("hello from the test")
    for handler in restore_root_logger.handlers:
        handler.flush()
    files = list(tmp_path.glob("arcade_*.log"))
    assert len(files) == 1
    assert "hello from the test" in files[0].read_text(encoding="utf-8")


def test_colored_formatter_restores_levelname():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
    text = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "\033[33mWARNING\033[0m msg" == text
    assert record.levelname == "WARNING"


def test_colored_formatter_shortens_package_loggers():
    formatter = ColoredFormatter("%(levelname)s %(name)s %(message)s")
    record = logging.LogRecord("arcade_locales.core.i18n", logging.INFO, __file__, 1, "msg", None, None)
    assert formatter.format(record) == "INFO core.i18n msg"
    assert record.name == "arcade_locales.core.i18n"

    other = logging.LogRecord("pydantic", logging.INFO, __file__, 1, "msg", None, None)
    assert formatter.format(other) == "INFO pydantic msg"
