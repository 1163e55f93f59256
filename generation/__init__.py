from generation.push_id import (
    UID_LENGTH,
    PushID,
    SafeIterator,
    generator,
    is_push_id,
    next_id,
    safe_generator,
)
from generation.suffix import SUFFIX_LENGTH, MonotonicSuffix
from generation.validation import is_uid

__all__ = [
    "UID_LENGTH",
    "SUFFIX_LENGTH",
    "PushID",
    "SafeIterator",
    "MonotonicSuffix",
    "generator",
    "safe_generator",
    "is_push_id",
    "is_uid",
    "next_id",
]
