"""
Fixed-width base62 codec for 20-byte KSUID buffers.

Text is always 27 characters: the widest 160-bit value needs 27 base62 digits,
shorter encodings are left-padded with the zero digit.
"""

from ksuid.errors import DecodeError, DecodeLengthError, LengthError

BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
TOTAL_BYTES = 20
ENCODED_LENGTH = 27

_DIGITS = {char: value for value, char in enumerate(BASE62)}


def to_base62(raw):
    """Encode 20 bytes as a 27-character base62 string."""
    if len(raw) != TOTAL_BYTES:
        raise LengthError(TOTAL_BYTES, len(raw))

    n = int.from_bytes(raw, byteorder="big")

    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])

    return "".join(reversed(chars)).rjust(ENCODED_LENGTH, BASE62[0])


def from_base62(text):
    """
    Decode base62 text back into 20 bytes.

    Each leading zero digit contributes a zero byte ahead of the number's
    minimal big-endian bytes. Anything past 20 bytes is dropped from the front,
    anything short of 20 is rejected.
    """
    n = 0
    for position, char in enumerate(text):
        digit = _DIGITS.get(char)
        if digit is None:
            raise DecodeError(char=char, position=position)
        n = n * 62 + digit

    significant = text.lstrip(BASE62[0])
    leading = len(text) - len(significant)
    loaded = bytes(leading) + n.to_bytes((n.bit_length() + 7) // 8, byteorder="big")

    # Digits beyond the 27-wide field cannot come from to_base62
    if len(significant) > ENCODED_LENGTH:
        raise DecodeLengthError(len(loaded))

    loaded = loaded[-TOTAL_BYTES:]
    if len(loaded) != TOTAL_BYTES:
        raise DecodeLengthError(len(loaded))
    return loaded
