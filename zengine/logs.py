"""Engine and editor loggers writing to standard output."""

from __future__ import annotations

import logging
import sys

__all__ = ["initialize", "engine_logger", "editor_logger"]

ENGINE_LOGGER_NAME = "ENGINE"
EDITOR_LOGGER_NAME = "EDITOR"
_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"

_LOGGERS: dict[str, logging.Logger] = {}
_log = logging.getLogger(__name__)


class _ConsoleSink(logging.StreamHandler):
    """Standard-output handler shared by the engine and editor loggers."""


def initialize() -> None:
    """Create the engine and editor loggers around one shared console sink."""
    sink = _ConsoleSink(sys.stdout)
    sink.setFormatter(logging.Formatter(_FORMAT))
    for name in (ENGINE_LOGGER_NAME, EDITOR_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in [h for h in logger.handlers if isinstance(h, _ConsoleSink)]:
            logger.removeHandler(handler)
        logger.addHandler(sink)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _LOGGERS[name] = logger

    _log.info("Engine logger initialized")
    _log.info("Editor logger initialized")


def _get(name: str) -> logging.Logger:
    try:
        return _LOGGERS[name]
    except KeyError:
        raise RuntimeError("loggers are not initialized; call initialize() first") from None


def engine_logger() -> logging.Logger:
    """The logger for messages from the engine."""
    return _get(ENGINE_LOGGER_NAME)


def editor_logger() -> logging.Logger:
    """The logger for messages from the editor."""
    return _get(EDITOR_LOGGER_NAME)