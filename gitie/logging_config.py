"""Diagnostic logging setup.

Environment:
- GITIE_LOG: log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default WARNING.

Diagnostics always go to stderr so stdout only ever carries git output or
the AI answer.
"""

import logging
import os
import sys
from typing import Optional

from gitie.config import ENV_LOG_LEVEL

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(name)s | %(message)s"


def get_log_level(level: Optional[str] = None) -> int:
    """Resolve a level name (argument, then GITIE_LOG) to a logging constant.

    Unknown names fall back to WARNING.
    """
    name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    if isinstance(value, int):
        return value
    return logging.WARNING


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging to stderr.

    Args:
        level: Log level name. Overrides GITIE_LOG when given.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=get_log_level(level),
        handlers=[handler],
        force=True,
    )

    # Suppress noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
