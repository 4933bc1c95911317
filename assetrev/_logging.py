"""
Opt-in diagnostics for assetrev.

Every processor, finder and file helper takes the same three knobs:

    HTMLProcessor(path, content, finder, log_callback=print)   # user-facing messages
    HTMLProcessor(path, content, finder, logger=my_logger)     # your own logger
    HTMLProcessor(path, content, finder, log=True)             # the "assetrev.*" loggers

With none of them the library stays silent.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _noop_callback(msg: str) -> None:
    pass


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger diagnostics go to.

    An explicit `logger` wins; `enabled` turns on the named module logger
    at DEBUG so progress messages show up; otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "assetrev")
        lg.setLevel(logging.DEBUG)
        # Bubble up to the root so the application's handlers (and caplog) see it.
        lg.propagate = True
        return lg
    return NoopLogger()


def resolve_callback(log_callback: Optional[Callable[[str], None]]) -> Callable[[str], None]:
    """Return `log_callback`, or a callback that discards every message."""
    return log_callback if log_callback is not None else _noop_callback
