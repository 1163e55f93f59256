"""Push ID generation and validation routes."""

from fastapi import APIRouter, HTTPException, Query

from encoding.alphabets import get_encodings, resolve
from generation.validation import is_uid

router = APIRouter(prefix="/api/v1", tags=["ids"])

# These will be set by app.py
_push_id = None
_max_batch = 1000


def init(push_id, max_batch):
    """Initialize with the shared generator and batch limit."""
    global _push_id, _max_batch
    _push_id = push_id
    _max_batch = max_batch


@router.get("/ids")
async def generate_ids(count: int = Query(1, ge=1)):
    """Generate count IDs from the shared generator."""
    if count > _max_batch:
        raise HTTPException(status_code=400, detail=f"count must be at most {_max_batch}")
    # generate() never awaits, so the batch is contiguous on the event loop
    return {
        "encoding": _push_id.encoding,
        "ids": [_push_id.generate() for _ in range(count)],
    }


@router.get("/ids/{value}/validate")
async def validate_id(value: str, encoding: str | None = None):
    """Check a candidate ID against length and alphabet."""
    encoding = encoding if encoding is not None else _push_id.encoding
    return {"value": value, "encoding": encoding, "valid": is_uid(value, encoding)}


@router.get("/encodings")
async def encodings():
    """List supported encodings with their radices."""
    return [{"name": name, "radix": resolve(name).radix} for name in get_encodings()]
