# SPDX-License-Identifier: MIT
"""Pre-release identifier types.

A pre-release identifier is either numeric (compared by integer value) or
alphanumeric (compared by codepoint). The kind is always derived from the
identifier's text by :func:`classify`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DIGITS = frozenset("0123456789")
IDENTIFIER_CHARS = DIGITS | frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-"
)


@dataclass(frozen=True, slots=True)
class Numeric:
    """A pre-release identifier made only of digits."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Numeric value must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Numeric value must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Alphanumeric:
    """A pre-release identifier containing at least one non-digit."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Alphanumeric text must be a str, got {type(self.text).__name__}")
        if not is_identifier_text(self.text) or is_all_digits(self.text):
            raise ValueError(f"Invalid alphanumeric identifier: {self.text!r}")

    def __str__(self) -> str:
        return self.text


Identifier = Union[Numeric, Alphanumeric]


def is_all_digits(text: str) -> bool:
    """Return True if text is non-empty and made only of ASCII digits.

    ``str.isdigit`` is not used because it also accepts non-ASCII digits.
    """
    return bool(text) and all(ch in DIGITS for ch in text)


def is_identifier_text(text: str) -> bool:
    """Return True if text is non-empty and drawn from ``[0-9A-Za-z-]``."""
    return bool(text) and all(ch in IDENTIFIER_CHARS for ch in text)


def has_leading_zero(text: str) -> bool:
    """Return True for numeric text like ``"01"``; ``"0"`` itself is allowed."""
    return len(text) > 1 and text[0] == "0"


def classify(text: str) -> Identifier:
    """Classify charset-valid identifier text.

    Args:
        text: Non-empty text already checked against ``[0-9A-Za-z-]``

    Returns:
        ``Numeric`` if every character is a digit, otherwise ``Alphanumeric``

    Examples:
        >>> classify("11")
        Numeric(value=11)
        >>> classify("rc")
        Alphanumeric(text='rc')
        >>> classify("0a")
        Alphanumeric(text='0a')
    """
    if is_all_digits(text):
        return Numeric(int(text))
    return Alphanumeric(text)
