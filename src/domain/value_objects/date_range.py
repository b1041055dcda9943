"""
Date range value object for scheduling windows.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from src.domain.exceptions.validation_error import InvalidArgumentError
from src.domain.shared.guards import is_naive


@dataclass(frozen=True)
class DateRange:
    """Closed-at-start time window used for appointments and scheduling."""

    start: datetime
    end: datetime

    def __post_init__(self):
        """Validate range bounds."""
        if self.start is None or self.end is None:
            raise InvalidArgumentError("Date range requires both start and end")
        if is_naive(self.start) or is_naive(self.end):
            raise InvalidArgumentError("Date range bounds must be timezone-aware")
        if self.end < self.start:
            raise InvalidArgumentError("End date cannot be before start date")

    @classmethod
    def starting_at(cls, start: datetime, duration: timedelta) -> "DateRange":
        """Build a range of the given length beginning at start."""
        return cls(start, start + duration)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_in_days(self) -> int:
        """Get whole days covered by the range."""
        return self.duration.days

    def overlaps(self, other: "DateRange") -> bool:
        """Check half-open overlap; ranges that only touch do not overlap."""
        return self.start < other.end and other.start < self.end

    def contains(self, moment: datetime) -> bool:
        """Check if a moment falls inside the range, bounds included."""
        return self.start <= moment <= self.end

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d} to {self.end:%Y-%m-%d}"
