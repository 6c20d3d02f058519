import logging
import os
from datetime import datetime

LOGGER_NAME = "strhmac"
LOG_LEVEL_ENV = "STRHMAC_LOG_LEVEL"


class HMACLogFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        # YYYY-MM-DD HH:MM:SS,mmm
        dt = datetime.fromtimestamp(record.created)
        return dt.strftime("%Y-%m-%d %H:%M:%S,%f")[:-3]

    def format(self, record):
        line = f"{self.formatTime(record)} - {record.levelname} [{record.threadName}] {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        if record.stack_info:
            line += "\n" + self.formatStack(record.stack_info)
        return line


def _resolve_level(level):
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    if str(level).isdigit():
        return int(level)
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level=None) -> logging.Logger:
    """Send strhmac records to stderr. Level falls back to STRHMAC_LOG_LEVEL."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    # Clear any existing handlers to avoid duplicates
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(HMACLogFormatter())
    logger.addHandler(stream_handler)
    return logger
