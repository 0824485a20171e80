"""Character classes shared by the URI parser and the host-port parser."""

from __future__ import annotations

from typing import Optional


ALPHA = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
DIGIT = frozenset("0123456789")
HEXDIG = DIGIT | frozenset("ABCDEFabcdef")
SCHEME_EXTRA = frozenset("+-.")
SPACE = frozenset(" \t\n\r\f\v")

AUTHORITY_TERMINATORS = frozenset("/?#")
PATH_TERMINATORS = frozenset("?#")
HOST_SEPARATORS = frozenset(",;")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def is_alpha(char: str) -> bool:
    return char in ALPHA


def is_digit(char: str) -> bool:
    return char in DIGIT


def is_hex_digit(char: str) -> bool:
    return char in HEXDIG


def is_space(char: str) -> bool:
    return char in SPACE


def is_scheme_char(char: str, position: int) -> bool:
    """Return True if ``char`` may appear at ``position`` of a scheme.

    The first character must be a letter; later ones may also be digits or
    one of ``+ - .``.
    """
    if position == 0:
        return is_alpha(char)
    return is_alpha(char) or is_digit(char) or char in SCHEME_EXTRA


def hex_value(char: str) -> int:
    """Return the numeric value of a single hex digit."""
    if not is_hex_digit(char):
        raise ValueError(f"Not a hex digit: {char!r}")
    return int(char, 16)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_LOWER)


def trim_space(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    start = 0
    end = len(text)
    while start < end and is_space(text[start]):
        start += 1
    while end > start and is_space(text[end - 1]):
        end -= 1
    return text[start:end]


def find_first(text: str, chars: frozenset, start: int = 0) -> int:
    """Return the index of the first character of ``text[start:]`` in ``chars``.

    Returns ``len(text)`` when none is found.
    """
    index = start
    length = len(text)
    while index < length and text[index] not in chars:
        index += 1
    return index


def first_invalid_scheme_char(text: str) -> Optional[int]:
    """Return the index of the first invalid scheme character, if any."""
    for position, char in enumerate(text):
        if not is_scheme_char(char, position):
            return position
    return None


__all__ = [
    "ALPHA",
    "DIGIT",
    "HEXDIG",
    "SCHEME_EXTRA",
    "SPACE",
    "AUTHORITY_TERMINATORS",
    "PATH_TERMINATORS",
    "HOST_SEPARATORS",
    "is_alpha",
    "is_digit",
    "is_hex_digit",
    "is_space",
    "is_scheme_char",
    "hex_value",
    "ascii_lower",
    "trim_space",
    "find_first",
    "first_invalid_scheme_char",
]
