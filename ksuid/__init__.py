"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: timestamp prefix + random payload = 20 bytes = 27 char base62 string.
"""

from ksuid.base62 import BASE62, ENCODED_LENGTH, TOTAL_BYTES, from_base62, to_base62
from ksuid.core import KSUID_EPOCH, BaseKsuid
from ksuid.errors import (
    DecodeError,
    DecodeLengthError,
    KsuidError,
    LengthError,
    PayloadLengthError,
    RandomSourceError,
)
from ksuid.millis import KsuidMs
from ksuid.seconds import Ksuid

VARIANTS = {"ksuid": Ksuid, "ksuid_ms": KsuidMs}


def generate_ksuid():
    """Generate a 27-character sortable unique ID."""
    return str(Ksuid.new())


__all__ = [
    "BASE62",
    "ENCODED_LENGTH",
    "TOTAL_BYTES",
    "KSUID_EPOCH",
    "VARIANTS",
    "BaseKsuid",
    "Ksuid",
    "KsuidMs",
    "KsuidError",
    "DecodeError",
    "DecodeLengthError",
    "LengthError",
    "PayloadLengthError",
    "RandomSourceError",
    "from_base62",
    "generate_ksuid",
    "to_base62",
]
