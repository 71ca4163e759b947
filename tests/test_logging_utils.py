"""
test_logging_utils.py
---------------------
"""

import logging

import pytest

from solandra_svg.logging_utils import ColorFormatter, LOGGER_NAME, configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.setLevel(level)


def test_console_only(clean_logger):
    assert configure_logging(logging.DEBUG) is None
    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.DEBUG


def test_file_handler_and_no_duplicates(clean_logger, tmp_path):
    path = configure_logging(logging.INFO, log_dir=tmp_path / "logs", run_prefix="unit")
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("unit_PID")
    configure_logging(logging.INFO, log_dir=tmp_path / "logs")
    assert len(clean_logger.handlers) == 2

    clean_logger.info("hello file")
    for h in clean_logger.handlers:
        h.flush()
    logs = list((tmp_path / "logs").glob("*.log"))
    assert any("hello file" in f.read_text() for f in logs)


def test_color_formatter_includes_level_and_message():
    record = logging.LogRecord(LOGGER_NAME, logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    text = ColorFormatter(datefmt="%H:%M:%S").format(record)
    assert "WARNING" in text
    assert "careful now" in text
    assert f"[{LOGGER_NAME}]" in text
