"""
Typed conversion of element text.

Conversions never raise: each returns a ParseResult holding either the
converted value or the reason the text was rejected. Overflow, malformed
literals and empty text all come back through the same failure branch.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel


INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

# ASCII digits only, no underscores or padding (int() accepts all three)
_INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')


class ParseResult(BaseModel):
    """
    Outcome of converting one text value.

    Attributes:
        value: Converted value (None on failure)
        error: Why the text was rejected (None on success)

    Example:
        >>> parse_int("42").value
        42
        >>> parse_int("4x").ok
        False
    """

    value: Any = None
    error: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> 'ParseResult':
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> 'ParseResult':
        return cls(error=error)


def _parse_bounded_integer(text: str, low: int, high: int, type_name: str) -> ParseResult:
    if not _INTEGER_LITERAL.fullmatch(text):
        return ParseResult.failure(f"'{text}' is not a base-10 integer")

    number = int(text)
    if number < low or number > high:
        return ParseResult.failure(
            f"{text} is out of {type_name} range [{low}, {high}]"
        )
    return ParseResult.success(number)


def parse_int(text: str) -> ParseResult:
    """
    Convert text to a signed 32-bit integer.

    Args:
        text: Decimal literal with an optional leading sign

    Returns:
        ParseResult with an int, or a failure for malformed or
        out-of-range text
    """
    return _parse_bounded_integer(text, INT_MIN, INT_MAX, 'int')


def parse_long(text: str) -> ParseResult:
    """Convert text to a signed 64-bit integer (see parse_int)."""
    return _parse_bounded_integer(text, LONG_MIN, LONG_MAX, 'long')


def parse_boolean(text: str) -> ParseResult:
    """
    Convert text to a boolean.

    Lenient: "true" in any letter case is True, every other string
    (including "yes", "1" and "") is False. Never fails.
    """
    return ParseResult.success(text.lower() == 'true')


def parse_string(text: str) -> ParseResult:
    return ParseResult.success(text)
