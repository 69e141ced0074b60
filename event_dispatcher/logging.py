# Logging setup for the event_dispatcher package logger.
#
# Only the "event_dispatcher" logger is configured; the root logger and any
# handlers the embedding application installed are left alone.

import logging
import sys
from typing import Optional, TextIO

from event_dispatcher.settings import Settings

PACKAGE_LOGGER_NAME = "event_dispatcher"

DISPATCHER_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

FALLBACK_LOG_LEVEL = "INFO"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class _DispatcherHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces our own handler and nothing else."""


def setup_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    propagate: bool = True,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Args:
        level: Level name. Falls back to LOG_LEVEL from settings, then to INFO.
        stream: Where records are written. Defaults to stderr.
        propagate: Whether records also reach the application's root handlers.

    Returns:
        The configured "event_dispatcher" logger.
    """
    requested = (level or Settings().get_log_level(default=FALLBACK_LOG_LEVEL)).upper()
    level_name = requested if requested in _LEVELS else FALLBACK_LOG_LEVEL

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in [h for h in package_logger.handlers if isinstance(h, _DispatcherHandler)]:
        package_logger.removeHandler(handler)

    handler = _DispatcherHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(DISPATCHER_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level_name)
    package_logger.propagate = propagate

    if level_name != requested:
        package_logger.warning(f"Unknown log level '{requested}', using {FALLBACK_LOG_LEVEL}.")
    package_logger.debug(f"event_dispatcher logging set to {level_name}")
    return package_logger
