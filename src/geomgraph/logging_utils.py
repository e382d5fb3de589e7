"""Logging utilities for geomgraph.

Loggers live under the ``geomgraph`` namespace.  The package installs a
``NullHandler`` on import; :func:`configure_logging` attaches a stream
handler without touching the process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT = 'geomgraph'


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Attach a stdout handler to the 'geomgraph' logger and set its level."""
    root = logging.getLogger(_ROOT)
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.setLevel(_to_level(level))
    root.propagate = False
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'geomgraph' namespace."""
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f"{_ROOT}.{name}"
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
