from __future__ import annotations
import logging
import warnings

from .config import DEFAULT_LOG_LEVEL, Config


def _resolve_level(value) -> int:
    level = logging.getLevelName(str(value).upper())
    if isinstance(level, int):
        return level
    warnings.warn(
        f"Unknown log level {value!r}, falling back to {DEFAULT_LOG_LEVEL}",
        RuntimeWarning,
        stacklevel=3,
    )
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logger(name: str, config=Config) -> logging.Logger:
    """Return the logger for ``name``.

    The stream handler and level live on the top-level package logger
    (``wordgame`` for ``wordgame.game_logic``), which does not propagate to
    the root logger. Module loggers stay bare and hand their records up, so
    each record is emitted once even when the application configures root
    logging. Calling it again does not stack handlers.
    """
    top = logging.getLogger(name.split('.', 1)[0])
    top.setLevel(_resolve_level(config.LOG_LEVEL))
    top.propagate = False
    if not top.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        top.addHandler(handler)
    return logging.getLogger(name)
