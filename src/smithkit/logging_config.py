"""
Logging setup for applications embedding smithkit.

The engine only emits DEBUG records (skipped grid values, undefined
readout quantities) on loggers below ``smithkit``. Library users who do
not call setup_logging see nothing: the package logger carries a
NullHandler installed in smithkit/__init__.py.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "smithkit"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Marks handlers installed here so repeated calls replace only those
_HANDLER_TAG = '_smithkit_handler'


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return resolved
    return level


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Route smithkit log records to stdout and optionally to a file.

    Handlers from an earlier call are closed and replaced; handlers the
    application attached itself are left alone.

    Args:
        level: Logging level, as a number or a name such as 'DEBUG'
        log_file: Optional path of a log file (overwritten)

    Returns:
        The ``smithkit`` logger

    Raises:
        ValueError: If level is an unknown level name
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            handler.close()
            logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    logger.debug("smithkit logging at %s", logging.getLevelName(level))
    return logger
