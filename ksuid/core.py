"""
Common KSUID value type.

A KSUID is 20 immutable bytes: a big-endian timestamp prefix followed by a
payload. Equality, ordering and hashing look at the bytes only, so byte order
is creation order for ids of the same variant.
"""

import functools
import os

from pydantic_core import core_schema

from internal.logging import get_logger
from ksuid.base62 import TOTAL_BYTES, from_base62, to_base62
from ksuid.errors import LengthError, PayloadLengthError, RandomSourceError
from utils.timestamp import to_unix_seconds

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000


def random_bytes(count):
    """Draw `count` bytes from the OS secure random source."""
    try:
        return os.urandom(count)
    except (OSError, NotImplementedError) as exc:
        get_logger().error("Random source unavailable", error=exc, count=count)
        raise RandomSourceError("Failed to read random payload", context={"count": count}, cause=exc) from exc


@functools.total_ordering
class BaseKsuid:
    """Shared behaviour of the KSUID variants; subclasses set the byte split."""

    __slots__ = ("_bytes",)

    TIMESTAMP_BYTES = 0
    PAYLOAD_BYTES = 0

    def __init__(self, raw):
        # ints are rejected, not zero-filled
        raw = bytes(memoryview(raw))
        if len(raw) != TOTAL_BYTES:
            raise LengthError(TOTAL_BYTES, len(raw))
        self._bytes = raw

    @classmethod
    def from_bytes(cls, raw):
        """Wrap 20 bytes as-is. The timestamp layout is not validated."""
        return cls(raw)

    @classmethod
    def from_base62(cls, text):
        return cls(from_base62(text))

    parse = from_base62

    @classmethod
    def new(cls, timestamp=None, payload=None):
        """Create from a datetime (now when omitted) and optional payload."""
        seconds = None if timestamp is None else to_unix_seconds(timestamp)
        return cls.from_seconds(seconds, payload)

    @classmethod
    def from_seconds(cls, timestamp=None, payload=None):
        raise NotImplementedError

    @classmethod
    def _assemble(cls, prefix, payload):
        if payload is None:
            payload = random_bytes(cls.PAYLOAD_BYTES)
        elif len(payload) != cls.PAYLOAD_BYTES:
            raise PayloadLengthError(cls.PAYLOAD_BYTES, len(payload))
        return cls(prefix + bytes(payload))

    @property
    def bytes(self):
        return self._bytes

    @property
    def payload(self):
        return self._bytes[self.TIMESTAMP_BYTES:]

    @property
    def timestamp(self):
        raise NotImplementedError

    @property
    def timestamp_seconds(self):
        """Absolute Unix seconds of the timestamp."""
        return to_unix_seconds(self.timestamp)

    def to_base62(self):
        return to_base62(self._bytes)

    def __str__(self):
        return self.to_base62()

    def __repr__(self):
        return f"{type(self).__name__}('{self.to_base62()}')"

    def __bytes__(self):
        return self._bytes

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __setattr__(self, name, value):
        if hasattr(self, "_bytes"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self), (self._bytes,))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        # Text in and out goes through the base62 codec only
        from_text = core_schema.no_info_after_validator_function(cls.from_base62, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_text]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
