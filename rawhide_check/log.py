"""Logger construction for the checker.

Nothing here touches the root logger: :func:`build_logger` returns a named
logger configured from a :class:`LogOptions`, and callers pass it along
explicitly.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

LOGGER_NAME = "rawhide_check"


@dataclass
class LogOptions:
    level: int | str = logging.INFO
    fmt: str = "%(asctime)s [%(levelname)s] %(message)s"
    datefmt: str = "%H:%M:%S"
    stream: TextIO = field(default_factory=lambda: sys.stderr)


def build_logger(options: LogOptions, name: str = LOGGER_NAME) -> logging.Logger:
    """Return the logger *name* writing to ``options.stream``.

    The logger still lives in the ``logging`` registry, so library modules
    logging under ``rawhide_check.*`` reach its handler; only this function
    configures it.  Calling it again replaces the handler instead of adding a
    second one.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(options.stream)
    handler.setFormatter(logging.Formatter(options.fmt, datefmt=options.datefmt))
    logger.addHandler(handler)
    logger.setLevel(options.level)
    logger.propagate = False
    return logger
