"""
Logging configuration for the ATCF parser.
Provides plain text or JSON-formatted logs on stderr.
"""
import logging
import sys
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = 'atcf_parser'


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional context."""

    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name


def setup_logging(level='WARNING', fmt='text', stream=None):
    """
    Configure package logging.

    Args:
        level: Log level name or number
        fmt: 'json' for structured output, anything else for plain text
        stream: Output stream (defaults to stderr so stdout stays clean for JSON output)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)

    # Remove handlers from a previous call
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    if fmt == 'json':
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(name)s %(message)s'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Logging configured", extra={
        'log_level': logging.getLevelName(level),
        'log_format': fmt
    })

    return logger
