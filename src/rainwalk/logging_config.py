"""
Logging Configuration
Sets up the 'rainwalk' logger and forwards Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("rainwalk.qt")


def qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    """Route qDebug/qWarning/... output (e.g. timer or painter warnings) to logging."""
    qt_logger.log(_QT_LEVELS.get(mode, logging.WARNING), message)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None, capture_qt: bool = True) -> logging.Logger:
    """
    Configures the logger for the 'rainwalk' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also save logs to a file.
        capture_qt: Install a Qt message handler that logs through 'rainwalk.qt'.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("rainwalk")
    logger.setLevel(level)

    # Drop our previous handlers on re-configuration
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        qInstallMessageHandler(qt_message_handler)

    logger.info(f"Logging initialized ({logging.getLevelName(level)}).")
    return logger
