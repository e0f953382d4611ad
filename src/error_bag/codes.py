from __future__ import annotations

from typing import TypeAlias

from .errors import InvalidErrorCode

ErrorCode: TypeAlias = str | int


def canonical_code(code: ErrorCode) -> str:
    """Return the string key used to store *code*.

    Integers are stored as their decimal form so ``42`` and ``"42"`` name the
    same code. Strings, the empty string included, pass through untouched.
    """
    if isinstance(code, bool):
        raise InvalidErrorCode(value=code)
    if isinstance(code, int):
        return str(int(code))
    if isinstance(code, str):
        # plain str for StrEnum members and other subclasses
        return str.__str__(code)
    raise InvalidErrorCode(value=code)
