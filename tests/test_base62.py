"""Unit tests for the base62 codec."""

import os

import pytest

from ksuid.base62 import BASE62, ENCODED_LENGTH, from_base62, to_base62
from ksuid.errors import DecodeError, DecodeLengthError, LengthError


class TestToBase62:
    """Tests for encoding."""

    def test_zero_buffer_is_all_zero_digits(self):
        """All-zero bytes encode to 27 zero digits."""
        assert to_base62(bytes(20)) == "0" * 27

    def test_max_buffer(self):
        """Largest 160-bit value fills the field."""
        assert to_base62(b"\xff" * 20) == "aWgEPTl1tmebfsQzFP4bxwgy80V"

    def test_reference_value(self):
        """Matches the segmentio/ksuid README example."""
        raw = bytes.fromhex("0669F7EFB5A1CD34B5F99D1154FB6853345C9735")
        assert to_base62(raw) == "0ujtsYcgvSTl8PAuAdqWYSMnLOv"

    def test_fixed_width(self):
        """Output is always 27 characters."""
        for raw in (bytes(19) + b"\x01", b"\x01" + bytes(19), os.urandom(20)):
            encoded = to_base62(raw)
            assert len(encoded) == ENCODED_LENGTH
            assert all(char in BASE62 for char in encoded)

    def test_wrong_size_rejected(self):
        """Only 20-byte buffers can be encoded."""
        with pytest.raises(LengthError):
            to_base62(bytes(19))


class TestFromBase62:
    """Tests for decoding."""

    def test_round_trip_random(self):
        """Random buffers survive encode then decode."""
        for _ in range(200):
            raw = os.urandom(20)
            assert from_base62(to_base62(raw)) == raw

    def test_round_trip_leading_zero_bytes(self):
        """Leading zero bytes are restored from leading zero digits."""
        for zeros in range(21):
            raw = bytes(zeros) + b"\x7f" * (20 - zeros)
            assert from_base62(to_base62(raw)) == raw

    def test_decode_leading_zero_digits(self):
        """Text with many leading zeros still yields 20 bytes."""
        raw = from_base62("000000pryYUMiBILyxOCoroLz6w")
        assert raw == bytes(4) + bytes.fromhex("1b7d20e59156e80c7aad50c707cbd4fa")

    def test_extra_leading_zeros_ignored(self):
        """Zero digits beyond the 27-wide field only add dropped zero bytes."""
        text = "1srOrx2ZWZBpBUvZwXKQmoEYga2"
        assert from_base62("00000" + text) == from_base62(text)

    def test_overflow_truncated_to_last_20_bytes(self):
        """A 27-digit value above 2**160 keeps its low 20 bytes."""
        raw = from_base62("z" * 27)
        assert raw == bytes.fromhex("b286c93bf191b2feda4ca1ea7f86883af7ffffff")

    def test_invalid_character(self):
        """Characters outside the alphabet fail to decode."""
        with pytest.raises(DecodeError) as exc_info:
            from_base62("1srOrx2ZWZBpBUvZwXKQmoEYg-2")
        assert exc_info.value.context == {"char": "-", "position": 25}
        assert isinstance(exc_info.value, ValueError)

    def test_short_string_rejected(self):
        """Text decoding to fewer than 20 bytes is rejected."""
        with pytest.raises(DecodeLengthError) as exc_info:
            from_base62("ZBpBUvZwXKQmoEYga2")
        assert exc_info.value.length == 14
        assert "unexpected length 14" in str(exc_info.value)

    def test_one_digit_past_field_rejected(self):
        """A 28th significant digit is rejected rather than truncated."""
        with pytest.raises(DecodeLengthError) as exc_info:
            from_base62("1" + "0" * 27)
        assert exc_info.value.length == 21

    def test_long_string_rejected(self):
        """Text wider than the 27-digit field is rejected."""
        with pytest.raises(DecodeLengthError) as exc_info:
            from_base62("1srOrx2ZWZBpBUvZwXKQmoEYga21srOrx2ZWZBpBUvZwXKQmoEYga2")
        assert exc_info.value.length == 40

    def test_empty_string_rejected(self):
        """Empty text has no bytes."""
        with pytest.raises(DecodeLengthError):
            from_base62("")
