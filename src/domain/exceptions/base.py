"""
Base domain exception.
"""


class DomainError(Exception):
    """Base exception for work order, vendor and scheduling rule violations."""

    pass
