"""Typed parse errors raised by the URI parser."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    """Every way a URI can fail to parse."""

    EMPTY_INPUT = "empty_input"
    MISSING_SCHEME = "missing_scheme"
    EMPTY_SCHEME = "empty_scheme"
    INVALID_SCHEME_CHAR = "invalid_scheme_char"
    UNCLOSED_IPV6_BRACKET = "unclosed_ipv6_bracket"
    UNEXPECTED_TRAILING_CHARS = "unexpected_trailing_chars"
    EMPTY_PORT = "empty_port"
    INVALID_PORT = "invalid_port"
    PORT_OUT_OF_RANGE = "port_out_of_range"
    EMPTY_HOST_ITEM = "empty_host_item"


class URIParseError(ValueError):
    """Base class for URI parse failures.

    Attributes:
        kind: The :class:`ParseErrorKind` describing the violation.
        text: The input (or host token) that was being parsed.
        position: Offset in ``text`` where the violation was found, if known.
    """

    kind: ParseErrorKind
    default_message = "invalid URI"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.text = text
        self.position = position
        super().__init__(message or self.default_message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self)!r}, text={self.text!r}, "
            f"position={self.position!r})"
        )


class EmptyInput(URIParseError):
    kind = ParseErrorKind.EMPTY_INPUT
    default_message = "empty input"


class MissingScheme(URIParseError):
    kind = ParseErrorKind.MISSING_SCHEME
    default_message = "missing scheme"


class EmptyScheme(URIParseError):
    kind = ParseErrorKind.EMPTY_SCHEME
    default_message = "empty scheme"


class InvalidSchemeChar(URIParseError):
    kind = ParseErrorKind.INVALID_SCHEME_CHAR
    default_message = "invalid scheme character"


class UnclosedIPv6Bracket(URIParseError):
    kind = ParseErrorKind.UNCLOSED_IPV6_BRACKET
    default_message = "unclosed IPv6 bracket"


class UnexpectedTrailingChars(URIParseError):
    kind = ParseErrorKind.UNEXPECTED_TRAILING_CHARS
    default_message = "unexpected characters after IPv6 literal"


class EmptyPort(URIParseError):
    kind = ParseErrorKind.EMPTY_PORT
    default_message = "empty port"


class InvalidPort(URIParseError):
    kind = ParseErrorKind.INVALID_PORT
    default_message = "port contains non-digit"


class PortOutOfRange(URIParseError):
    kind = ParseErrorKind.PORT_OUT_OF_RANGE
    default_message = "port out of range"


class EmptyHostItem(URIParseError):
    kind = ParseErrorKind.EMPTY_HOST_ITEM
    default_message = "empty host item"


__all__ = [
    "ParseErrorKind",
    "URIParseError",
    "EmptyInput",
    "MissingScheme",
    "EmptyScheme",
    "InvalidSchemeChar",
    "UnclosedIPv6Bracket",
    "UnexpectedTrailingChars",
    "EmptyPort",
    "InvalidPort",
    "PortOutOfRange",
    "EmptyHostItem",
]
