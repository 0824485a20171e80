"""Unit tests for percent decoding and encoding."""

import pytest

from cluster_uri import percent


class TestDecode:
    """Tests for lenient percent decoding."""

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "/path/to/resource", "a=1&b=2", "你好", "[::1]:80"],
    )
    def test_text_without_percent_unchanged(self, text):
        assert percent.decode(text) == text

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("path%20with%20spaces", "path with spaces"),
            ("c%2B%2B", "c++"),
            ("user%40domain", "user@domain"),
            ("pass%23123", "pass#123"),
            ("%e2%9c%93", "✓"),
            ("/path/to/%E4%BD%A0%E5%A5%BD", "/path/to/你好"),
            ("%41", "A"),
        ],
    )
    def test_decodes_escapes(self, raw, expected):
        assert percent.decode(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["100%", "100%2", "%", "%%", "%zz", "%4g", "50%-off"],
    )
    def test_malformed_escapes_pass_through(self, raw):
        assert percent.decode(raw) == raw

    def test_mixed_valid_and_malformed(self):
        assert percent.decode("%41%%42%4") == "A%B%4"

    def test_escape_consumes_three_chars(self):
        assert percent.decode("%2541") == "%41"

    def test_invalid_utf8_is_replaced(self):
        assert percent.decode("%FF") == "�"
        assert percent.decode("%FF", errors="surrogateescape") == "\udcff"

    def test_decode_to_bytes(self):
        assert percent.decode_to_bytes("a%00b%FF") == b"a\x00b\xff"
        assert percent.decode_to_bytes("é%") == "é%".encode("utf-8")


class TestEncode:
    """Tests for percent encoding."""

    def test_unreserved_untouched(self):
        assert percent.encode("AZaz09-._~") == "AZaz09-._~"

    def test_reserved_escaped_uppercase(self):
        assert percent.encode("user@domain") == "user%40domain"
        assert percent.encode("a b/c") == "a%20b%2Fc"

    def test_safe_characters(self):
        assert percent.encode("/a b/", safe="/") == "/a%20b/"

    def test_utf8(self):
        assert percent.encode("✓") == "%E2%9C%93"

    @pytest.mark.parametrize("text", ["pass#123", "a:b@c", "100%", "你好 world"])
    def test_decode_reverses_encode(self, text):
        assert percent.decode(percent.encode(text)) == text
