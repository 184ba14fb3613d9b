"""Tests for the pyrnx logging setup"""

import logging

import pytest

from pyrnx.logger import (
    ColoredFormatter,
    LogContext,
    LoggerConfig,
    LogLevel,
    get_logger,
    setup_logger,
)


@pytest.fixture
def scratch_logger():
    logger = setup_logger("pyrnx.tests.scratch", "INFO", console=False)
    yield logger
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def test_level_names():
    assert LogLevel.value_of("debug") == logging.DEBUG
    assert LogLevel.value_of("TRACE") == 5
    assert logging.getLevelName(5) == "TRACE"
    with pytest.raises(ValueError):
        LogLevel.value_of("verbose")


def test_setup_logger_console_and_file(tmp_path):
    log_file = tmp_path / "pyrnx.log"
    logger = setup_logger("pyrnx.tests.file", "DEBUG", log_file=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)
        logger.debug("split into 2 parts")
        for handler in logger.handlers:
            handler.flush()
        assert "split into 2 parts" in log_file.read_text()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []


def test_setup_logger_replaces_handlers():
    setup_logger("pyrnx.tests.repeat", "INFO")
    logger = setup_logger("pyrnx.tests.repeat", "INFO", color=False)
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0].formatter, ColoredFormatter)
    logger.handlers = []


def test_trace_level(scratch_logger, caplog):
    with caplog.at_level(5, logger="pyrnx.tests.scratch"):
        scratch_logger.trace("G07: omitted")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    caplog.clear()
    scratch_logger.setLevel(logging.DEBUG)
    scratch_logger.trace("G08: omitted")
    assert caplog.records == []


def test_log_context_restores_level(scratch_logger):
    with LogContext(scratch_logger, "DEBUG") as logger:
        assert logger.level == logging.DEBUG
    assert scratch_logger.level == logging.INFO


def test_colored_formatter_leaves_record():
    record = logging.LogRecord("pyrnx", logging.WARNING, __file__, 1, "gap", None, None)
    text = ColoredFormatter('%(levelname)s %(message)s').format(record)
    assert text.endswith("gap")
    assert "\033[33m" in text
    assert record.levelname == "WARNING"


def test_get_logger_prefix():
    assert get_logger("processing").name == "pyrnx.processing"
    assert get_logger("pyrnx.gnss").name == "pyrnx.gnss"
    assert get_logger("pyrnx").name == "pyrnx"


def test_logger_config_module_levels():
    config = LoggerConfig()
    config.configure_from_dict({
        'default_level': 'WARNING',
        'console': False,
        'module_levels': {'pyrnx.tests.module': 'DEBUG'},
    })
    assert config.get_level_for_module('pyrnx.tests.module') == 'DEBUG'
    assert config.get_level_for_module('pyrnx.rinex') == 'WARNING'
    with pytest.raises(ValueError):
        config.configure_from_dict({'default_level': 'LOUD'})

    root = logging.getLogger("pyrnx")
    module_logger = logging.getLogger('pyrnx.tests.module')
    saved = (root.level, root.handlers)
    try:
        config.setup_all_loggers()
        assert module_logger.level == logging.DEBUG
        assert module_logger.propagate is False
        assert root.level == logging.WARNING
    finally:
        root.setLevel(saved[0])
        root.handlers = saved[1]
        module_logger.handlers = []
        module_logger.propagate = True
