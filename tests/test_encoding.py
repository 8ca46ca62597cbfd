"""
Tests for UTF-8 text encoding helpers.
"""

import pytest

from edgeutils.core.encoding import text_decode, text_encode


class TestTextEncoding:
    """Test text_encode and text_decode."""

    @pytest.mark.parametrize("text", [
        "",
        "hello",
        "héllo wörld",
        "日本語のテキスト",
        "emoji 🎉 and 𝄞",
        chr(0) + "nul",
        "line\r\nbreak",
    ])
    def test_round_trip(self, text):
        """Test decode(encode(s)) returns the original string."""
        assert text_decode(text_encode(text)) == text

    def test_encode_is_utf8(self):
        """Test encoded bytes are UTF-8."""
        assert text_encode("é") == bytes([0xC3, 0xA9])
        assert text_encode("abc") == b"abc"

    def test_decode_accepts_buffer_types(self):
        """Test bytearray and memoryview input."""
        data = bytes([0xC3, 0xA9])

        assert text_decode(bytearray(data)) == "é"
        assert text_decode(memoryview(data)) == "é"

    @pytest.mark.parametrize("data", [
        bytes([0xFF]),
        bytes([0xC0, 0xAF]),
        bytes([0xED, 0xA0, 0x80]),
        bytes([0xE6, 0x97]),
    ])
    def test_decode_invalid_bytes_raises(self, data):
        """Test malformed UTF-8 propagates UnicodeDecodeError."""
        with pytest.raises(UnicodeDecodeError):
            text_decode(data)
