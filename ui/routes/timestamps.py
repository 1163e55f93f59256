"""Timestamp encode/decode routes."""

from fastapi import APIRouter

from encoding.timestamp import encode_timestamp, decode_timestamp
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1/timestamps", tags=["timestamps"])


@router.get("/encode")
async def encode(timestamp: int, encoding: str | None = None):
    """Encode a millisecond timestamp."""
    return {"timestamp": timestamp, "encoded": encode_timestamp(timestamp, encoding)}


@router.get("/decode")
async def decode(value: str, encoding: str | None = None):
    """Decode the timestamp prefix of an ID."""
    timestamp = decode_timestamp(value, encoding)
    try:
        iso = format_timestamp(timestamp)
    except (ValueError, OverflowError, OSError):
        # Beyond datetime's year 9999
        iso = None
    return {"timestamp": timestamp, "iso": iso}
