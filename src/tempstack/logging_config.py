"""Logging configuration for tempstack.

Logs always go to stderr so they never mix with captured text on
stdout.  Rich's handler is used when rich is installed; the import is
deferred so that bootstrap paths keep working without it.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from tempstack.utils.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

LOGGER_NAME: str = "tempstack"

_PLAIN_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_level(
    verbose: bool = False,
    env: Mapping[str, str] | None = None,
) -> int:
    """Pick the effective log level.

    ``verbose`` forces DEBUG; otherwise ``$TEMPSTACK_LOG_LEVEL`` is used,
    falling back to WARNING for unknown or missing values.
    """
    if verbose:
        return logging.DEBUG
    env = os.environ if env is None else env
    name = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``tempstack`` logger tree and return its root.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_build_handler())
    return root
