import asyncio
import time
from enum import Enum

from ksuid import Ksuid, KsuidError, from_base62, to_base62
from ksuid.core import random_bytes
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

class HealthChecker:
    def __init__(self, ttl=1.0, timeout=5):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._timeout = timeout
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=self._timeout)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

# segmentio/ksuid README example
REFERENCE_RAW = bytes.fromhex("0669F7EFB5A1CD34B5F99D1154FB6853345C9735")
REFERENCE_TEXT = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"

def create_codec_check(raw=REFERENCE_RAW, text=REFERENCE_TEXT):
    async def check():
        try:
            encoded = to_base62(raw)
            decoded = from_base62(text)
        except KsuidError as exc:
            return CheckResult("codec", Status.FAIL, str(exc))
        if encoded != text or decoded != raw:
            return CheckResult("codec", Status.FAIL, "mismatch")
        return CheckResult("codec", Status.OK)
    return check

def create_random_source_check(count=Ksuid.PAYLOAD_BYTES):
    async def check():
        try:
            sample = random_bytes(count)
        except KsuidError as exc:
            return CheckResult("random", Status.FAIL, str(exc))
        # all-zero sample
        if not any(sample):
            return CheckResult("random", Status.DEGRADED, "zeros")
        return CheckResult("random", Status.OK, f"{len(sample)}b")
    return check
