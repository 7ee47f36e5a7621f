"""KSUID generation and inspection routes."""

from fastapi import APIRouter, HTTPException, Query

from internal.logging import get_logger
from ksuid import VARIANTS
from ui.schemas import RECORDS, CreateKsuidRequest, GeneratedIds, Variant

router = APIRouter(prefix="/api/v1/ksuids", tags=["ksuids"])

# Set by app.py
_config = None


def init(config):
    """Initialize with the KSUID section of the app config."""
    global _config
    _config = config


def _variant(name):
    return name or _config.default_variant


@router.get("")
async def generate(variant: Variant | None = None, count: int = Query(1, ge=1)):
    """Generate `count` fresh ids of the requested variant."""
    if count > _config.max_batch:
        raise HTTPException(status_code=422, detail=f"count must be at most {_config.max_batch}")
    name = _variant(variant)
    cls = VARIANTS[name]
    ids = [str(cls.new()) for _ in range(count)]
    get_logger().debug("ksuid.generated", variant=name, count=count)
    return GeneratedIds(variant=name, ids=ids)


@router.post("")
async def create(request: CreateKsuidRequest):
    """Build an id from an explicit timestamp and/or hex payload."""
    name = _variant(request.variant)
    value = VARIANTS[name].new(request.timestamp, request.payload_bytes())
    return RECORDS[name].from_ksuid(value)


@router.get("/{value}")
async def inspect(value: str, variant: Variant | None = None):
    """Decode a base62 id into its timestamp and payload."""
    name = _variant(variant)
    return RECORDS[name].from_ksuid(VARIANTS[name].from_base62(value))
