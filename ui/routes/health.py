"""Health routes."""

from fastapi import APIRouter

from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# Set by app.py
_push_id = None


def init(push_id):
    global _push_id
    _push_id = push_id


@router.get("/health")
async def health():
    """Liveness plus generator state."""
    last = _push_id.timestamp
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "encoding": _push_id.encoding,
        "last_timestamp": last,
        "last_generated_at": format_timestamp(last) if last is not None else None,
    }
