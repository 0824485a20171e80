"""Value types produced by the URI parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from . import percent
from .serializer import URISerializer


MAX_PORT = 65535


@dataclass(frozen=True)
class ParseOptions:
    """Behaviour switches for parsing and serialization.

    ``decode_fragment`` makes :attr:`ParsedURI.fragment` percent-decode like
    :attr:`ParsedURI.query`. ``conditional_authority_marker`` emits ``//`` only
    when the parsed input carried one.
    """

    decode_fragment: bool = False
    conditional_authority_marker: bool = False


DEFAULT_OPTIONS = ParseOptions()


@dataclass(frozen=True)
class HostPort:
    """A single host with an optional port.

    IPv6 hosts are stored without their surrounding brackets.
    """

    host: str
    port: Optional[int] = None

    def __post_init__(self) -> None:
        if self.port is not None and not 0 <= self.port <= MAX_PORT:
            raise ValueError(f"Port out of range: {self.port}")

    @property
    def is_ipv6(self) -> bool:
        return ":" in self.host

    def decoded_host(self) -> str:
        return percent.decode(self.host)

    def to_string(self) -> str:
        return URISerializer.host_to_string(self)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class ParsedURI:
    """A parsed URI.

    Raw segments keep their percent escapes exactly as they appeared in the
    input; the ``path``, ``query`` and ``user_info`` properties decode on read.
    Equality compares the structured fields only.
    """

    scheme: str
    hosts: Tuple[HostPort, ...] = ()
    user_info_raw: Optional[str] = None
    path_raw: str = ""
    query_raw: Optional[str] = None
    fragment_raw: Optional[str] = None
    raw_input: str = field(default="", compare=False)
    has_authority: bool = field(default=True, compare=False)
    options: ParseOptions = field(default=DEFAULT_OPTIONS, compare=False, repr=False)

    @property
    def uri(self) -> str:
        """The original input string."""
        return self.raw_input

    @property
    def user_info(self) -> Optional[Tuple[str, str]]:
        """Decoded ``(user, password)``; password is ``""`` when absent."""
        if self.user_info_raw is None:
            return None
        user, _, password = self.user_info_raw.partition(":")
        return percent.decode(user), percent.decode(password)

    @property
    def user(self) -> Optional[str]:
        info = self.user_info
        return info[0] if info is not None else None

    @property
    def password(self) -> Optional[str]:
        info = self.user_info
        return info[1] if info is not None else None

    @property
    def path(self) -> str:
        return percent.decode(self.path_raw)

    @property
    def query(self) -> Optional[str]:
        if self.query_raw is None:
            return None
        return percent.decode(self.query_raw)

    @property
    def fragment(self) -> Optional[str]:
        """The fragment, raw unless ``options.decode_fragment`` is set."""
        if self.fragment_raw is None or not self.options.decode_fragment:
            return self.fragment_raw
        return percent.decode(self.fragment_raw)

    def authority_raw(self) -> str:
        return URISerializer.authority_to_string(self)

    def to_string(self) -> str:
        return URISerializer.to_string(self)

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["MAX_PORT", "ParseOptions", "DEFAULT_OPTIONS", "HostPort", "ParsedURI"]
