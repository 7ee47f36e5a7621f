"""Standard KSUID: 4-byte seconds timestamp, 16-byte payload."""

import struct

from ksuid.core import KSUID_EPOCH, BaseKsuid
from utils.timestamp import from_unix_seconds, now_seconds


class Ksuid(BaseKsuid):
    """K-sortable unique id with one second accuracy."""

    __slots__ = ()

    TIMESTAMP_BYTES = 4
    PAYLOAD_BYTES = 16

    @classmethod
    def new_raw(cls, timestamp, payload=None):
        """Create from seconds since KSUID_EPOCH, wrapped to 32 bits."""
        return cls._assemble(struct.pack(">I", timestamp & 0xFFFFFFFF), payload)

    @classmethod
    def from_seconds(cls, timestamp=None, payload=None):
        """
        Create from absolute Unix seconds (now when omitted).

        Times before KSUID_EPOCH or past its ~136 year window wrap silently.
        """
        if timestamp is None:
            timestamp = now_seconds()
        return cls.new_raw(timestamp - KSUID_EPOCH, payload)

    @property
    def timestamp_raw(self):
        """Seconds since KSUID_EPOCH."""
        return struct.unpack_from(">I", self._bytes)[0]

    @property
    def timestamp_seconds(self):
        return self.timestamp_raw + KSUID_EPOCH

    @property
    def timestamp(self):
        return from_unix_seconds(self.timestamp_seconds)
