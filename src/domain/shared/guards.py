"""
Input guards shared by entities and value objects.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

NIL_UUID = UUID(int=0)


def is_missing_id(value: Optional[UUID]) -> bool:
    """Check if an identifier is absent or the nil UUID."""
    return value is None or value == NIL_UUID


def is_blank(value: Optional[str]) -> bool:
    """Check if a string is absent, empty or whitespace only."""
    return value is None or not str(value).strip()


def is_naive(value: datetime) -> bool:
    """Check if a datetime carries no UTC offset."""
    return value.tzinfo is None or value.utcoffset() is None
