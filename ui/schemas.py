"""Request and response schemas for the KSUID API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator

from ksuid import Ksuid, KsuidMs

Variant = Literal["ksuid", "ksuid_ms"]


class KsuidRecord(BaseModel):
    """Decoded view of a standard KSUID."""

    id: Ksuid
    variant: Variant = "ksuid"
    timestamp: datetime
    timestamp_seconds: int
    timestamp_raw: int
    payload: str
    raw: str

    @classmethod
    def from_ksuid(cls, value):
        return cls(
            id=value,
            timestamp=value.timestamp,
            timestamp_seconds=value.timestamp_seconds,
            timestamp_raw=value.timestamp_raw,
            payload=value.payload.hex(),
            raw=value.bytes.hex(),
        )


class KsuidMsRecord(KsuidRecord):
    """Decoded view of a millisecond KSUID."""

    id: KsuidMs
    variant: Variant = "ksuid_ms"
    timestamp_millis: int

    @classmethod
    def from_ksuid(cls, value):
        return cls(
            id=value,
            timestamp=value.timestamp,
            timestamp_seconds=value.timestamp_seconds,
            timestamp_millis=value.timestamp_millis,
            timestamp_raw=value.timestamp_raw,
            payload=value.payload.hex(),
            raw=value.bytes.hex(),
        )


RECORDS = {"ksuid": KsuidRecord, "ksuid_ms": KsuidMsRecord}


class GeneratedIds(BaseModel):
    variant: Variant
    ids: list[str]


class CreateKsuidRequest(BaseModel):
    """Build a KSUID from explicit parts; omitted parts are now / random."""

    variant: Variant | None = None
    timestamp: datetime | None = None
    payload: str | None = None

    @field_validator("payload")
    @classmethod
    def validate_payload(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError("payload must be hex encoded")
        return v.lower()

    def payload_bytes(self):
        return None if self.payload is None else bytes.fromhex(self.payload)
