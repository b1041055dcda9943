"""Vendor domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from src.domain.entities.technician import Technician
from src.domain.exceptions.validation_error import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.domain.shared.guards import is_blank
from src.domain.value_objects.vendor_specialization import VendorSpecialization


@dataclass
class Vendor:
    """Vendor aggregate root representing a maintenance service provider."""

    name: str
    company_name: str
    phone_number: str
    email: str
    specialization: VendorSpecialization
    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    technicians: List[Technician] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate vendor data."""
        for field_name in ("name", "company_name", "phone_number", "email"):
            if is_blank(getattr(self, field_name)):
                raise RequiredFieldError(field_name)
        if self.specialization is None:
            raise RequiredFieldError("specialization")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    def add_technician(self, technician: Technician) -> None:
        """Attach a technician; duplicate detection is left to the caller."""
        if technician is None:
            raise InvalidArgumentError("Technician is required")

        self.technicians.append(technician)

    def has_technician(self, technician_id: UUID) -> bool:
        return any(technician.id == technician_id for technician in self.technicians)

    def available_technicians(self) -> List[Technician]:
        """Get technicians currently available for dispatch."""
        return [technician for technician in self.technicians if technician.is_available]

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def can_handle_work_order(
        self, required_specialization: VendorSpecialization
    ) -> bool:
        """Check if vendor is active and qualified for the specialization."""
        return self.is_active and self.specialization == required_specialization
