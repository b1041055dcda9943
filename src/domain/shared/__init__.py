"""
Shared domain helpers.
"""

from .guards import NIL_UUID, is_blank, is_missing_id, is_naive

__all__ = [
    "NIL_UUID",
    "is_blank",
    "is_missing_id",
    "is_naive",
]
