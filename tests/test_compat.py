"""Compatibility tests against reference KSUID vectors (tests/test_kuids.txt)."""

import json
from datetime import timedelta
from pathlib import Path

import pytest

from ksuid import KSUID_EPOCH, Ksuid, KsuidMs

FIXTURES_FILE = Path(__file__).parent / "test_kuids.txt"


def load_reference_lines():
    """One JSON object per line: absolute timestamp, hex payload, expected ksuid."""
    with open(FIXTURES_FILE) as file:
        return [json.loads(line) for line in file if line.strip()]


REFERENCE_LINES = load_reference_lines()


def _payload(line, size):
    return bytes.fromhex(line["payload"])[-size:]


@pytest.mark.parametrize("line", REFERENCE_LINES, ids=lambda line: line["ksuid"])
class TestReferenceVectors:
    """Each vector must encode and decode exactly."""

    def test_encode(self, line):
        """Timestamp and payload encode to the reference text."""
        payload = _payload(line, Ksuid.PAYLOAD_BYTES)
        constructed = Ksuid.new_raw(line["timestamp"] - KSUID_EPOCH, payload)
        assert str(constructed) == line["ksuid"]

    def test_decode(self, line):
        """Reference text decodes to the same timestamp and payload."""
        payload = _payload(line, Ksuid.PAYLOAD_BYTES)
        ksuid = Ksuid.from_base62(line["ksuid"])
        assert ksuid == Ksuid.from_seconds(line["timestamp"], payload)
        assert ksuid.payload == payload
        assert ksuid.timestamp_raw == line["timestamp"] - KSUID_EPOCH
        assert ksuid.timestamp_seconds == line["timestamp"]

    def test_millisecond_variant(self, line):
        """The millisecond variant reads the same text within a second."""
        ksuid = Ksuid.from_base62(line["ksuid"])
        ksuid_ms = KsuidMs.new(ksuid.timestamp, ksuid.payload[:KsuidMs.PAYLOAD_BYTES])
        assert ksuid_ms.timestamp == ksuid.timestamp

        rebuilt = KsuidMs.new(ksuid_ms.timestamp, ksuid_ms.payload)
        assert rebuilt.payload == ksuid_ms.payload
        assert rebuilt.timestamp == ksuid_ms.timestamp

        reinterpreted = KsuidMs.from_base62(line["ksuid"])
        assert abs(reinterpreted.timestamp - ksuid.timestamp) <= timedelta(milliseconds=1000)
        assert reinterpreted.to_base62() == line["ksuid"]


def test_reference_file_has_vectors():
    """The fixture file is not empty."""
    assert len(REFERENCE_LINES) >= 3
