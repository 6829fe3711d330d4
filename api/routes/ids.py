"""Identifier minting and parsing routes."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from core.errors import UIDError
from internal.logging import get_logger
from uid.timecodec import parse

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

# These will be set by app.py
_generator = None
_config = None


def init(generator, config):
    """Initialize with generator and config references."""
    global _generator, _config
    _generator = generator
    _config = config


@router.get("")
async def mint(count: int = Query(1, ge=1)):
    """Return `count` strictly increasing identifiers from the service generator."""
    if count > _config.server.max_batch:
        raise HTTPException(status_code=422, detail=f"count must be <= {_config.server.max_batch}")
    try:
        ids = [_generator.generate() for _ in range(count)]
    except UIDError as exc:
        # Clock past the prefix range or identifier space exhausted: a server fault
        get_logger().error("Minting failed", error=exc, error_id=exc.error_id, count=count)
        return JSONResponse(content=exc.to_dict(), status_code=503)
    return {"ids": ids}


@router.get("/{identifier}")
async def inspect(identifier: str):
    """Decode the timestamp prefix and split off the suffix."""
    uid_config = _config.uid
    parsed = parse(
        identifier,
        _generator.alphabet,
        uid_config.time_length,
        uid_config.random_length,
        uid_config.max_time,
    )
    return parsed.to_dict()
