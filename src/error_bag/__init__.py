"""Structured, multi-code error values."""

from loguru import logger

from .bag import MISSING, ErrorBag, Missing, is_error
from .codes import ErrorCode, canonical_code
from .errors import AppError, ErrorBagUsageError, InvalidErrorCode
from .log import setup_logging

__all__ = [
    "MISSING",
    "AppError",
    "ErrorBag",
    "ErrorBagUsageError",
    "ErrorCode",
    "InvalidErrorCode",
    "Missing",
    "canonical_code",
    "is_error",
    "setup_logging",
]

logger.disable(__name__)
