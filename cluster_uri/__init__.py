"""Parser and serializer for URIs with multi-host authorities."""

from .authority import AuthoritySplitter, HostPortParser
from .config import ParserSettings, get_settings
from .errors import (
    EmptyHostItem,
    EmptyInput,
    EmptyPort,
    EmptyScheme,
    InvalidPort,
    InvalidSchemeChar,
    MissingScheme,
    ParseErrorKind,
    PortOutOfRange,
    UnclosedIPv6Bracket,
    UnexpectedTrailingChars,
    URIParseError,
)
from .models import DEFAULT_OPTIONS, HostPort, ParsedURI, ParseOptions
from .parser import URIParser, parse
from .percent import decode, decode_to_bytes, encode
from .serializer import URISerializer

__version__ = "0.1.0"

__all__ = [
    "AuthoritySplitter",
    "HostPortParser",
    "ParserSettings",
    "get_settings",
    "EmptyHostItem",
    "EmptyInput",
    "EmptyPort",
    "EmptyScheme",
    "InvalidPort",
    "InvalidSchemeChar",
    "MissingScheme",
    "ParseErrorKind",
    "PortOutOfRange",
    "UnclosedIPv6Bracket",
    "UnexpectedTrailingChars",
    "URIParseError",
    "DEFAULT_OPTIONS",
    "HostPort",
    "ParsedURI",
    "ParseOptions",
    "URIParser",
    "parse",
    "decode",
    "decode_to_bytes",
    "encode",
    "URISerializer",
]
