"""
State-related domain exceptions.
"""

from typing import Optional

from .base import DomainError


class InvalidStateError(DomainError):
    """Raised when an operation is not legal for the current state."""

    def __init__(
        self, current_status: str, action: str, message: Optional[str] = None
    ):
        self.current_status = current_status
        self.action = action
        super().__init__(message or f"Cannot {action} in '{current_status}' status")


class PreconditionError(DomainError):
    """Raised when a state-dependent business rule is not satisfied."""

    pass
