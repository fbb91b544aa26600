"""
Package logger for the MangaFire adapter.

    from mangafire.logging import logger, set_debug_level
    set_debug_level('TRACE')

TRACE logs every selector miss and extracted record, COMPONENT logs one line
per adapter operation. MANGAFIRE_DEBUG_LEVEL picks the starting level and
MANGAFIRE_LOG_FILE adds a rotating log file next to the stderr output.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Literal

TRACE_LEVEL = 5
COMPONENT_LEVEL = 15

logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.addLevelName(COMPONENT_LEVEL, "COMPONENT")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_MAX_BYTES = 128 * 1024
LOG_FILE_BACKUPS = 5


class AdapterLogger(logging.Logger):
    """Logger with the two extra adapter levels."""

    def trace(self, message, *args, **kwargs):
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kwargs)

    def component(self, message, *args, **kwargs):
        if self.isEnabledFor(COMPONENT_LEVEL):
            self._log(COMPONENT_LEVEL, message, args, **kwargs)


DEBUG_LEVELS = {
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'COMPONENT': COMPONENT_LEVEL,
    'DEBUG': logging.DEBUG,
    'TRACE': TRACE_LEVEL,
}


def _create_logger():
    logging.setLoggerClass(AdapterLogger)
    try:
        return logging.getLogger('mangafire')
    finally:
        logging.setLoggerClass(logging.Logger)


def _attach_handlers(target):
    formatter = logging.Formatter(LOG_FORMAT)

    # stdout carries the CLI's JSON
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    target.addHandler(stream)

    log_file = os.getenv('MANGAFIRE_LOG_FILE')
    if not log_file:
        return
    if os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
    rotating = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding='utf-8',
        delay=True,
    )
    rotating.setFormatter(formatter)
    target.addHandler(rotating)


def set_debug_level(level: Literal['ERROR', 'WARNING', 'INFO', 'COMPONENT', 'DEBUG', 'TRACE'] = 'INFO'):
    """Apply a named verbosity to the package logger and its handlers."""
    numeric_level = DEBUG_LEVELS.get(str(level).upper(), logging.INFO)
    logger.setLevel(numeric_level)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)
    logger.debug(f"[LOGGING] Level is now {level} ({numeric_level})")


logger = _create_logger()
if not logger.handlers:
    _attach_handlers(logger)
set_debug_level(os.getenv('MANGAFIRE_DEBUG_LEVEL', 'INFO'))

__all__ = ['logger', 'set_debug_level', 'TRACE_LEVEL', 'COMPONENT_LEVEL']
