"""
Maintenance schedule aggregate for recurring preventive maintenance.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions.state_error import InvalidStateError
from src.domain.exceptions.validation_error import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.domain.shared.guards import is_blank, is_missing_id, is_naive
from src.domain.value_objects.recurrence_pattern import RecurrencePattern
from src.domain.value_objects.vendor_specialization import VendorSpecialization


@dataclass
class MaintenanceSchedule:
    """Maintenance schedule aggregate root."""

    property_id: UUID
    task_description: str
    recurrence: RecurrencePattern
    required_specialization: VendorSpecialization
    next_scheduled_date: datetime
    unit_id: Optional[UUID] = None
    preferred_vendor_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate schedule data."""
        if is_blank(self.task_description):
            raise RequiredFieldError("task_description")
        if self.next_scheduled_date is None:
            raise RequiredFieldError("next_scheduled_date")
        if is_naive(self.next_scheduled_date):
            raise InvalidArgumentError("Next scheduled date must be timezone-aware")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @classmethod
    def create(
        cls,
        property_id: UUID,
        unit_id: Optional[UUID],
        task_description: str,
        recurrence: RecurrencePattern,
        required_specialization: VendorSpecialization,
        next_scheduled_date: datetime,
    ) -> "MaintenanceSchedule":
        """Create an active schedule."""
        return cls(
            property_id=property_id,
            unit_id=unit_id,
            task_description=task_description,
            recurrence=recurrence,
            required_specialization=required_specialization,
            next_scheduled_date=next_scheduled_date,
        )

    def set_preferred_vendor(self, vendor_id: UUID) -> None:
        if is_missing_id(vendor_id):
            raise InvalidArgumentError("Vendor ID cannot be empty")

        self.preferred_vendor_id = vendor_id

    def update_next_scheduled_date(self) -> None:
        """Advance the due date by exactly one recurrence unit."""
        try:
            pattern = RecurrencePattern(self.recurrence)
        except ValueError:
            raise InvalidStateError(
                str(self.recurrence),
                "advance schedule",
                f"Unknown recurrence pattern: {self.recurrence}",
            )

        self.next_scheduled_date = pattern.next_occurrence(self.next_scheduled_date)

    def is_due(self) -> bool:
        """Check if the schedule is active and its date has arrived."""
        return self.is_active and self.next_scheduled_date <= datetime.now(
            timezone.utc
        )

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False
