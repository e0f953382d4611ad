from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from .config import Settings


def setup_logging(settings: Settings | None = None, sink: Any = sys.stderr) -> int:
    """Enable the package logger and attach *sink*.

    Returns the loguru sink id so callers can ``logger.remove`` it later.
    """
    settings = settings or Settings()
    level = "TRACE" if settings.trace_mutations else settings.log_level
    logger.enable("error_bag")
    return logger.add(
        sink,
        level=level,
        filter="error_bag",
        format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    )
