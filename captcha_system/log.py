"""Logging setup for the captcha generator.

Library modules only create loggers under ``captcha_system``; handlers are
installed by the process embedding the generator (or by the CLI) through
:func:`configure_logging`.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "captcha_system"
LOG_FILE_NAME = "captcha_generation.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] [trace=%(trace_id)s] %(message)s"


# Ensure every log record gets a trace_id attribute so the formatter can
# print a correlation id even when no LoggerAdapter supplies one.
class TraceFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "-"
        return True


def configure_logging(level: Union[int, str] = logging.INFO,
                      log_dir: Optional[str] = None) -> logging.Logger:
    """Attach console (and optionally rotating file) handlers to the package logger.

    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    trace_filter = TraceFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(trace_filter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        # Rotating file handler to avoid uncontrolled log growth
        file_handler = RotatingFileHandler(os.path.join(log_dir, LOG_FILE_NAME),
                                           maxBytes=5 * 1024 * 1024, backupCount=5,
                                           encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(trace_filter)
        logger.addHandler(file_handler)

    return logger


def get_trace_logger(trace_id: Optional[str], name: str = LOGGER_NAME) -> logging.LoggerAdapter:
    """Return a LoggerAdapter that attaches a trace_id to each LogRecord.

    Use this where a challenge id is known so the messages for one captcha
    can be correlated.
    """
    return logging.LoggerAdapter(logging.getLogger(name), {"trace_id": trace_id if trace_id else "-"})
