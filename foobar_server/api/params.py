from __future__ import annotations

import re

__all__ = [
    "MISSING_LENGTH",
    "INVALID_LENGTH",
    "MalformedInput",
    "parse_length",
]

MISSING_LENGTH = "missing parameter: length"
INVALID_LENGTH = "invalid length"

# Optional sign followed by ASCII digits; no whitespace, underscores or decimals.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class MalformedInput(ValueError):
    """Raised when the `length` query parameter is missing or not an integer.

    The message is the exact response body; `code` is a stable machine code.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


def parse_length(raw: str | None) -> int:
    """Parse the raw `length` query value into a signed 64-bit integer."""
    if not raw:
        raise MalformedInput(MISSING_LENGTH, "missing_parameter")
    if not _INT_RE.fullmatch(raw):
        raise MalformedInput(INVALID_LENGTH, "invalid_length")
    value = int(raw, 10)
    if not (_INT64_MIN <= value <= _INT64_MAX):
        raise MalformedInput(INVALID_LENGTH, "invalid_length")
    return value
