"""Authority splitting and host[:port] token parsing."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import (
    EmptyHostItem,
    EmptyPort,
    InvalidPort,
    PortOutOfRange,
    UnclosedIPv6Bracket,
    UnexpectedTrailingChars,
)
from .grammar import HOST_SEPARATORS, is_digit, trim_space
from .models import MAX_PORT, HostPort


class AuthoritySplitter:
    """Split a raw authority into user-info and host tokens."""

    @classmethod
    def find_user_info_boundary(cls, authority: str) -> Optional[int]:
        """Return the index of the rightmost ``@`` outside brackets."""
        depth = 0
        boundary = None
        for index, char in enumerate(authority):
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
            elif char == "@" and depth == 0:
                boundary = index
        return boundary

    @classmethod
    def split_hosts(cls, host_list: str) -> List[str]:
        """Split a host list on ``,`` and ``;``.

        Tokens are trimmed and blank ones dropped. A non-blank list made up
        only of separators raises :class:`EmptyHostItem`.
        """
        tokens: List[str] = []
        start = 0
        for index, char in enumerate(host_list):
            if char in HOST_SEPARATORS:
                cls._append_token(tokens, host_list[start:index])
                start = index + 1
        cls._append_token(tokens, host_list[start:])

        if not tokens and trim_space(host_list):
            raise EmptyHostItem(
                "host list contains only separators", text=host_list, position=0
            )
        return tokens

    @staticmethod
    def _append_token(tokens: List[str], raw: str) -> None:
        token = trim_space(raw)
        if token:
            tokens.append(token)

    @classmethod
    def split(cls, authority: str) -> Tuple[Optional[str], List[str]]:
        """Return ``(user_info_raw, host_tokens)`` for a raw authority span.

        ``user_info_raw`` is ``None`` when there is no unbracketed ``@`` and
        may be ``""`` for inputs such as ``@host``.
        """
        boundary = cls.find_user_info_boundary(authority)
        if boundary is None:
            return None, cls.split_hosts(authority)
        return authority[:boundary], cls.split_hosts(authority[boundary + 1 :])


class HostPortParser:
    """Parse a single ``host[:port]`` or ``[ipv6][:port]`` token."""

    @classmethod
    def parse_port(cls, text: str, *, token: str = "", offset: int = 0) -> int:
        """Parse a decimal port, rejecting values above 65535.

        ``token`` and ``offset`` locate ``text`` inside the enclosing host
        token for error reporting.
        """
        source = token or text
        if not text:
            raise EmptyPort(text=source, position=offset)

        value = 0
        for index, char in enumerate(text):
            if not is_digit(char):
                raise InvalidPort(
                    f"port contains non-digit {char!r}",
                    text=source,
                    position=offset + index,
                )
            value = value * 10 + (ord(char) - 48)
            if value > MAX_PORT:
                raise PortOutOfRange(
                    f"port {text!r} exceeds {MAX_PORT}",
                    text=source,
                    position=offset + index,
                )
        return value

    @classmethod
    def parse_token(cls, token: str) -> HostPort:
        """Parse a trimmed host token.

        An unbracketed token with more than one colon is taken whole as the
        host, since splitting it would corrupt an IPv6 literal.
        """
        token = trim_space(token)
        if not token:
            raise EmptyHostItem(text=token, position=0)

        if token[0] == "[":
            return cls._parse_bracketed(token)

        colon = token.rfind(":")
        if colon == -1 or token.find(":") != colon:
            return HostPort(host=token)

        port = cls.parse_port(token[colon + 1 :], token=token, offset=colon + 1)
        return HostPort(host=token[:colon], port=port)

    @classmethod
    def _parse_bracketed(cls, token: str) -> HostPort:
        close = token.find("]")
        if close == -1:
            raise UnclosedIPv6Bracket(text=token, position=0)

        host = token[1:close]
        rest = close + 1
        if rest == len(token):
            return HostPort(host=host)
        if token[rest] != ":":
            raise UnexpectedTrailingChars(
                f"unexpected {token[rest:]!r} after IPv6 literal",
                text=token,
                position=rest,
            )
        port = cls.parse_port(token[rest + 1 :], token=token, offset=rest + 1)
        return HostPort(host=host, port=port)


__all__ = ["AuthoritySplitter", "HostPortParser"]
