"""
Work order status value object.
"""

from enum import Enum
from typing import FrozenSet

from src.domain.exceptions.validation_error import InvalidArgumentError


class WorkOrderStatus(str, Enum):
    """Work order lifecycle status enumeration."""

    NEW = "New"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @property
    def allowed_transitions(self) -> FrozenSet["WorkOrderStatus"]:
        """Get the statuses reachable from this one in a single step."""
        return _TRANSITIONS[self]

    def can_transition_to(self, new_status: "WorkOrderStatus") -> bool:
        """Check if moving to new_status is a legal transition."""
        return new_status in _TRANSITIONS[self]

    def is_final(self) -> bool:
        """Check if status is final (no outgoing transitions)."""
        return not _TRANSITIONS[self]

    @classmethod
    def from_string(cls, value: str) -> "WorkOrderStatus":
        """Parse a persisted status name."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Invalid work order status: {value}")

    def __str__(self) -> str:
        return self.value


_TRANSITIONS = {
    WorkOrderStatus.NEW: frozenset(
        {WorkOrderStatus.ASSIGNED, WorkOrderStatus.CANCELLED}
    ),
    WorkOrderStatus.ASSIGNED: frozenset(
        {
            WorkOrderStatus.IN_PROGRESS,
            WorkOrderStatus.NEW,
            WorkOrderStatus.CANCELLED,
        }
    ),
    WorkOrderStatus.IN_PROGRESS: frozenset(
        {WorkOrderStatus.COMPLETED, WorkOrderStatus.ASSIGNED}
    ),
    WorkOrderStatus.COMPLETED: frozenset(),
    WorkOrderStatus.CANCELLED: frozenset(),
}
