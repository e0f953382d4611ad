from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class AppError(Exception):
    """Base error for misuse of the error-bag API.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidErrorCode(AppError):
    """Raised when an error code is neither ``str`` nor ``int``."""

    value: object
    message: str = field(init=False)
    code: str = field(init=False, default="ERROR_BAG_INVALID_CODE")

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Error code must be str or int, got {type(self.value).__name__}",
        )
        object.__setattr__(
            self, "context", {"type": type(self.value).__name__, "value": repr(self.value)}
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorBagUsageError(AppError):
    message: str
    code: str = field(init=False, default="ERROR_BAG_USAGE")
