"""Rebuild URI strings from parsed values."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import HostPort, ParsedURI


class URISerializer:
    """Serialize :class:`ParsedURI` and :class:`HostPort` values."""

    @classmethod
    def host_to_string(cls, host: "HostPort") -> str:
        """Render ``host[:port]``, bracketing hosts that contain a colon."""
        text = f"[{host.host}]" if ":" in host.host else host.host
        if host.port is not None:
            text += f":{host.port}"
        return text

    @classmethod
    def authority_to_string(cls, uri: "ParsedURI") -> str:
        hosts = ",".join(cls.host_to_string(host) for host in uri.hosts)
        if uri.user_info_raw is not None:
            return f"{uri.user_info_raw}@{hosts}"
        return hosts

    @classmethod
    def to_string(cls, uri: "ParsedURI") -> str:
        """Serialize ``uri``.

        ``//`` follows the scheme unconditionally unless the value was parsed
        with ``conditional_authority_marker``, in which case it is written only
        for inputs that had one.
        """
        parts = [uri.scheme, ":"]
        if uri.has_authority or not uri.options.conditional_authority_marker:
            parts.append("//")
            parts.append(cls.authority_to_string(uri))
        parts.append(uri.path_raw)
        if uri.query_raw is not None:
            parts.append("?")
            parts.append(uri.query_raw)
        if uri.fragment_raw is not None:
            parts.append("#")
            parts.append(uri.fragment_raw)
        return "".join(parts)


__all__ = ["URISerializer"]
