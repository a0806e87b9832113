from __future__ import annotations

__all__ = [
    "FOO",
    "BAR",
    "FOOBAR",
    "RULES",
    "InvalidLength",
    "token_for",
    "generate",
    "render_sequence",
]

FOO = "foo"
BAR = "bar"
FOOBAR = "foobar"


# ------------------------
# Errors
# ------------------------
class InvalidLength(ValueError):
    """Raised when a sequence is requested with a negative length.

    The `code` attribute gives the API a stable machine code for the failure.
    """

    code: str = "invalid_length"


# ------------------------
# Rules
# ------------------------

# Evaluated top to bottom, first match wins. There is no rule for plain
# multiples of 5; those positions fall through to their decimal string.
RULES: tuple[tuple[int, str], ...] = (
    (15, FOOBAR),
    (7, BAR),
    (3, FOO),
)


def token_for(position: int) -> str:
    """Return the token for a single 1-indexed position."""
    if position < 1:
        raise ValueError("position must be >= 1")
    for divisor, token in RULES:
        if position % divisor == 0:
            return token
    return str(position)


# ------------------------
# Public API
# ------------------------

def generate(length: int) -> list[str]:
    """Return the FooBar sequence for positions 1..length.

    Rules, in priority order:
      divisible by 3 and 5 -> "foobar"
      divisible by 7       -> "bar"
      divisible by 3       -> "foo"
      otherwise            -> the position as a decimal string

    Raises:
        InvalidLength: if `length` is negative. No partial sequence is produced.
    """
    if length < 0:
        raise InvalidLength("length is negative")
    return [token_for(i) for i in range(1, length + 1)]


def render_sequence(seq: list[str]) -> str:
    """Render a sequence as a single bracketed, space-separated line."""
    return "[" + " ".join(seq) + "]"
