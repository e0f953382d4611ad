from __future__ import annotations

from enum import Enum
from typing import Any, Final, Literal

from loguru import logger

from .codes import ErrorCode, canonical_code
from .errors import ErrorBagUsageError


class Missing(Enum):
    """Marker for "no data was ever set", distinct from a stored ``None``."""

    MISSING = "MISSING"

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = Missing.MISSING


class ErrorBag:
    """Container of error codes, their messages and optional per-code data.

    Functions that can fail return either their result or an ``ErrorBag``;
    callers check with :func:`is_error` before using the value. A code may
    collect many messages but carries at most one data value. Integer codes
    are stored as their decimal string, so ``200`` and ``"200"`` are the same
    code.

    Instances are not synchronized; mutate from a single owner.
    """

    __slots__ = ("_errors", "_error_data")

    def __init__(
        self,
        code: ErrorCode | None = None,
        message: str | None = None,
        data: Any = MISSING,
    ) -> None:
        self._errors: dict[str, list[str]] = {}
        self._error_data: dict[str, Any] = {}

        if code is None and message is None:
            if data is not MISSING:
                raise ErrorBagUsageError(message="data requires a code and a message")
            return
        if code is None or message is None:
            raise ErrorBagUsageError(message="code and message must be given together")
        self.add(code, message, data)

    # queries

    def error_codes(self) -> list[str]:
        """Return all error codes in the order they were first added."""
        return list(self._errors)

    def error_code(self) -> str:
        """Return the first error code, or ``""`` if there are none."""
        return next(iter(self._errors), "")

    def error_messages(self, code: ErrorCode | None = None) -> list[str]:
        """Return messages for *code*, or every message when *code* is omitted.

        Unknown codes give an empty list.
        """
        if code is None:
            return [message for messages in self._errors.values() for message in messages]
        return list(self._errors.get(canonical_code(code), ()))

    def error_message(self, code: ErrorCode | None = None) -> str:
        """Return the first message of *code* (default: the first code)."""
        key = self.error_code() if code is None else canonical_code(code)
        messages = self._errors.get(key)
        if not messages:
            return ""
        return messages[0]

    def error_data(self, code: ErrorCode | None = None) -> Any:
        """Return data stored for *code* (default: the first code) or ``MISSING``."""
        key = self.error_code() if code is None else canonical_code(code)
        return self._error_data.get(key, MISSING)

    # mutators

    def add(self, code: ErrorCode, message: str, data: Any = MISSING) -> None:
        """Append *message* under *code*; replace the code's data if *data* is given."""
        key = canonical_code(code)
        self._errors.setdefault(key, []).append(message)
        logger.trace("Added message to error code {!r}: {!r}", key, message)
        if data is not MISSING:
            self._set_data(key, data)

    def add_data(self, data: Any, code: ErrorCode | None = None) -> None:
        """Set the single data value of *code*, defaulting to the first code.

        On an empty bag the data lands under the ``""`` code.
        """
        if code is None:
            key = self.error_code()
            if not self._errors:
                logger.debug("add_data on an empty error bag, storing under ''")
        else:
            key = canonical_code(code)
        self._set_data(key, data)

    def _set_data(self, key: str, data: Any) -> None:
        if key in self._error_data:
            logger.trace("Replacing data for error code {!r}", key)
        else:
            logger.trace("Set data for error code {!r}", key)
        self._error_data[key] = data

    @staticmethod
    def is_error(thing: object) -> bool:
        """Return ``True`` if *thing* is an ``ErrorBag``, whatever it holds."""
        return isinstance(thing, ErrorBag)

    def __repr__(self) -> str:
        return f"ErrorBag(errors={self._errors!r}, error_data={self._error_data!r})"


def is_error(thing: object) -> bool:
    return ErrorBag.is_error(thing)
