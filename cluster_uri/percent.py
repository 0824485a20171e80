"""Lenient percent-encoding helpers.

Decoding never fails: a ``%`` that is not followed by two hex digits is kept
literally. Stored raw segments are never modified; callers decode on read.
"""

from __future__ import annotations

from .grammar import ALPHA, DIGIT, hex_value, is_hex_digit


UNRESERVED = ALPHA | DIGIT | frozenset("-._~")

_HEX = "0123456789ABCDEF"


def decode_to_bytes(text: str) -> bytes:
    """Decode ``%XY`` escapes in ``text`` into raw bytes.

    Characters that are not part of an escape are emitted as their UTF-8
    encoding.
    """
    out = bytearray()
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if (
            char == "%"
            and index + 2 < length
            and is_hex_digit(text[index + 1])
            and is_hex_digit(text[index + 2])
        ):
            out.append(hex_value(text[index + 1]) * 16 + hex_value(text[index + 2]))
            index += 3
            continue
        out += char.encode("utf-8", "surrogatepass")
        index += 1
    return bytes(out)


def decode(text: str, encoding: str = "utf-8", errors: str = "replace") -> str:
    """Percent-decode ``text``.

    Decoded bytes are interpreted with ``encoding``; invalid sequences follow
    ``errors`` the same way :meth:`bytes.decode` does.
    """
    if "%" not in text:
        return text
    return decode_to_bytes(text).decode(encoding, errors)


def encode(text: str, safe: str = "") -> str:
    """Percent-encode every character outside the unreserved set and ``safe``."""
    keep = UNRESERVED | frozenset(safe)
    parts = []
    for char in text:
        if char in keep:
            parts.append(char)
            continue
        for byte in char.encode("utf-8"):
            parts.append("%" + _HEX[byte >> 4] + _HEX[byte & 0xF])
    return "".join(parts)


__all__ = ["UNRESERVED", "decode", "decode_to_bytes", "encode"]
