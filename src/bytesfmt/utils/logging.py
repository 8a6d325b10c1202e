"""Logging setup for the ``bytesfmt`` command line.

The library modules only create module loggers; option fallbacks in
permissive mode are reported at DEBUG. The CLI calls
:func:`configure_logging` so those messages can be surfaced with
``--log-level DEBUG`` or ``BYTESFMT_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger, preferring *level* over ``BYTESFMT_LOG_LEVEL``."""
    log_level = (level or os.getenv("BYTESFMT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
