"""
Work order priority value object.
"""

from enum import Enum

from src.domain.exceptions.validation_error import InvalidArgumentError


class WorkOrderPriority(int, Enum):
    """Work order priority levels, ordered by urgency."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    EMERGENCY = 4

    @property
    def level(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.name.title()

    def is_emergency(self) -> bool:
        """Check if priority is the highest level."""
        return self is WorkOrderPriority.EMERGENCY

    def is_higher_than(self, other: "WorkOrderPriority") -> bool:
        return self.value > other.value

    @classmethod
    def from_string(cls, value: str) -> "WorkOrderPriority":
        """Parse a priority name such as 'Emergency'."""
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidArgumentError(f"Invalid priority: {value}")

    def __str__(self) -> str:
        return self.display_name
