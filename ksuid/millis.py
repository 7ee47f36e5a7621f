"""
Millisecond KSUID: 5-byte timestamp, 15-byte payload.

The timestamp holds seconds since KSUID_EPOCH in its upper 32 bits and the
sub-second offset in 4ms units (0-249) in its low byte. Output is still a
valid standard KSUID, one payload byte is traded for accuracy.
"""

import struct

from ksuid.core import KSUID_EPOCH, BaseKsuid
from utils.timestamp import from_unix_millis, now_millis, to_unix_millis

_U64_BYTES = 8
_TIMESTAMP_MASK = 0xFFFFFFFFFF
_SECONDS_MASK = 0xFFFFFFFF00


class KsuidMs(BaseKsuid):
    """K-sortable unique id with 4ms accuracy."""

    __slots__ = ()

    TIMESTAMP_BYTES = 5
    PAYLOAD_BYTES = 15

    @classmethod
    def new_raw(cls, timestamp, payload=None):
        """Create from a raw 40-bit timestamp value; higher bits are dropped."""
        packed = struct.pack(">Q", timestamp & _TIMESTAMP_MASK)
        return cls._assemble(packed[_U64_BYTES - cls.TIMESTAMP_BYTES:], payload)

    @classmethod
    def from_millis(cls, timestamp=None, payload=None):
        """Create from absolute Unix milliseconds (now when omitted)."""
        if timestamp is None:
            timestamp = now_millis()
        seconds = timestamp // 1000 - KSUID_EPOCH
        units = (timestamp % 1000) >> 2
        return cls.new_raw(((seconds << 8) & _SECONDS_MASK) | units, payload)

    @classmethod
    def from_seconds(cls, timestamp=None, payload=None):
        if timestamp is not None:
            timestamp *= 1000
        return cls.from_millis(timestamp, payload)

    @classmethod
    def new(cls, timestamp=None, payload=None):
        millis = None if timestamp is None else to_unix_millis(timestamp)
        return cls.from_millis(millis, payload)

    @property
    def timestamp_raw(self):
        """Seconds since KSUID_EPOCH shifted left by 8, OR'd with 4ms units."""
        return struct.unpack_from(">Q", self._bytes)[0] >> ((_U64_BYTES - self.TIMESTAMP_BYTES) * 8)

    @property
    def timestamp_millis(self):
        raw = self.timestamp_raw
        seconds = (raw >> 8) + KSUID_EPOCH
        # A unit above 249 (e.g. a reinterpreted standard KSUID) must not carry into seconds
        millis = ((raw & 0xFF) << 2) % 1000
        return seconds * 1000 + millis

    @property
    def timestamp(self):
        return from_unix_millis(self.timestamp_millis)
