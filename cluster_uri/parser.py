"""Single-pass parser for URIs with multi-host authorities.

Accepts a superset of RFC 3986 where the authority may hold a comma or
semicolon separated list of ``host[:port]`` items, as used by clustered
service connection strings (``redis://h1:6379,h2:6380``).
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .authority import AuthoritySplitter, HostPortParser
from .errors import (
    EmptyInput,
    EmptyScheme,
    InvalidSchemeChar,
    MissingScheme,
    URIParseError,
)
from .grammar import (
    AUTHORITY_TERMINATORS,
    PATH_TERMINATORS,
    ascii_lower,
    find_first,
    first_invalid_scheme_char,
)
from .logging import get_logger
from .models import DEFAULT_OPTIONS, HostPort, ParsedURI, ParseOptions


logger = get_logger(__name__)


class URIParser:
    """Parse URI strings into :class:`ParsedURI` values."""

    @classmethod
    def parse_scheme(cls, text: str) -> str:
        """Return the scheme of ``text``, validating its characters."""
        colon = text.find(":")
        if colon == -1:
            raise MissingScheme(text=text)
        if colon == 0:
            raise EmptyScheme(text=text, position=0)

        scheme = text[:colon]
        bad = first_invalid_scheme_char(scheme)
        if bad is not None:
            raise InvalidSchemeChar(
                f"invalid scheme character {scheme[bad]!r}", text=text, position=bad
            )
        return scheme

    @classmethod
    def parse_hosts(cls, tokens: Iterable[str]) -> Tuple[HostPort, ...]:
        """Parse host tokens in order, lowercasing each host."""
        hosts = []
        for token in tokens:
            parsed = HostPortParser.parse_token(token)
            hosts.append(HostPort(host=ascii_lower(parsed.host), port=parsed.port))
        return tuple(hosts)

    @classmethod
    def parse(cls, text: str, options: Optional[ParseOptions] = None) -> ParsedURI:
        """Parse ``text`` into a :class:`ParsedURI`.

        Raises a :class:`URIParseError` subclass describing the first
        violation found.
        """
        if not isinstance(text, str):
            raise TypeError(f"URI must be a str, not {type(text).__name__}")
        options = options or DEFAULT_OPTIONS

        try:
            uri = cls._parse(text, options)
        except URIParseError as exc:
            logger.debug(
                "uri_parse_failed", kind=exc.kind.value, position=exc.position
            )
            raise

        logger.debug("uri_parsed", scheme=uri.scheme, host_count=len(uri.hosts))
        return uri

    @classmethod
    def _parse(cls, text: str, options: ParseOptions) -> ParsedURI:
        if not text:
            raise EmptyInput(text=text, position=0)

        length = len(text)
        scheme = cls.parse_scheme(text)
        cursor = len(scheme) + 1

        user_info_raw = None
        hosts = ()
        has_authority = text.startswith("//", cursor)
        if has_authority:
            cursor += 2
            end = find_first(text, AUTHORITY_TERMINATORS, cursor)
            if end > cursor:
                user_info_raw, tokens = AuthoritySplitter.split(text[cursor:end])
                hosts = cls.parse_hosts(tokens)
            cursor = end

        end = find_first(text, PATH_TERMINATORS, cursor)
        path_raw = text[cursor:end]
        cursor = end

        query_raw = None
        if cursor < length and text[cursor] == "?":
            end = text.find("#", cursor + 1)
            if end == -1:
                end = length
            query_raw = text[cursor + 1 : end]
            cursor = end

        fragment_raw = None
        if cursor < length and text[cursor] == "#":
            fragment_raw = text[cursor + 1 :]

        return ParsedURI(
            scheme=scheme,
            hosts=hosts,
            user_info_raw=user_info_raw,
            path_raw=path_raw,
            query_raw=query_raw,
            fragment_raw=fragment_raw,
            raw_input=text,
            has_authority=has_authority,
            options=options,
        )


def parse(text: str, options: Optional[ParseOptions] = None) -> ParsedURI:
    """Parse ``text``; see :meth:`URIParser.parse`."""
    return URIParser.parse(text, options)


__all__ = ["URIParser", "parse"]
