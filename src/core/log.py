"""Logging setup. Modules simply do `from loguru import logger`; callers configure the sink once at start-up."""

import sys
from typing import Any, Optional

from loguru import logger

from src.core.config import get_settings

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: Optional[str] = None, sink: Any = None) -> int:
    """Replace loguru's default handler. Returns the id of the new handler.

    The sink defaults to whatever sys.stderr is at call time.
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
