import logging

from PySide6.QtCore import QtMsgType

from rainwalk.config import TICK_INTERVAL_MS
from rainwalk.logging_config import qt_message_handler, setup_logging
from rainwalk.main import parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.debug is False
    assert args.log_file is None
    assert args.interval == TICK_INTERVAL_MS


def test_parse_args_ignores_qt_options():
    args = parse_args(["--debug", "--interval", "250", "-style", "fusion"])
    assert args.debug is True
    assert args.interval == 250


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "rainwalk.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file), capture_qt=False)
    try:
        assert logger.name == "rainwalk"
        assert len(logger.handlers) == 2
        logging.getLogger("rainwalk.model").debug("hello from the model")
        for handler in logger.handlers:
            handler.flush()
        assert "rainwalk.model - DEBUG - hello from the model" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_setup_logging_is_idempotent():
    logger = setup_logging(capture_qt=False)
    setup_logging(capture_qt=False)
    assert len(logger.handlers) == 1
    logger.handlers.clear()


def test_qt_messages_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="rainwalk.qt"):
        qt_message_handler(QtMsgType.QtWarningMsg, None, "QObject::startTimer: oops")
    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].name == "rainwalk.qt"
