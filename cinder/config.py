from __future__ import annotations
import logging
import os


DEFAULT_ENTRY_POINT = 'main'
_DEFAULT_MAX_CALL_DEPTH = 100
_DEFAULT_LOG_LEVEL = 'WARNING'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def entry_point() -> str:
    return value_from_env('CINDER_ENTRY_POINT', DEFAULT_ENTRY_POINT)


def max_call_depth() -> int:
    raw = value_from_env('CINDER_MAX_CALL_DEPTH', str(_DEFAULT_MAX_CALL_DEPTH))
    try:
        depth = int(raw)
    except ValueError:
        return _DEFAULT_MAX_CALL_DEPTH
    return depth if depth > 0 else _DEFAULT_MAX_CALL_DEPTH


def log_level() -> int:
    name = value_from_env('CINDER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    """Attach a stderr handler to the package logger at the configured level.

    The library itself never calls this; embedders opt in once at startup so
    that `CINDER_LOG_LEVEL` takes effect.
    """
    logger = logging.getLogger('cinder')
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(log_level())
