"""Property domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from src.domain.entities.unit import Unit
from src.domain.exceptions.state_error import PreconditionError
from src.domain.exceptions.validation_error import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.domain.shared.guards import is_blank
from src.domain.value_objects.address import Address
from src.domain.value_objects.property_type import PropertyType


@dataclass
class Property:
    """Property aggregate root owning its units."""

    name: str
    address: Address
    property_type: PropertyType
    id: UUID = field(default_factory=uuid4)
    units: List[Unit] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate property data."""
        if is_blank(self.name):
            raise RequiredFieldError("name")
        if self.address is None:
            raise RequiredFieldError("address")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @classmethod
    def create(
        cls, name: str, address: Address, property_type: PropertyType
    ) -> "Property":
        return cls(name=name, address=address, property_type=property_type)

    def add_unit(self, unit: Unit) -> None:
        """Add a unit; unit numbers are unique within a property."""
        if unit is None:
            raise InvalidArgumentError("Unit is required")
        if any(existing.unit_number == unit.unit_number for existing in self.units):
            raise PreconditionError(
                f"Unit {unit.unit_number} already exists in this property"
            )

        self.units.append(unit)
        self.updated_at = datetime.now(timezone.utc)

    def has_unit(self, unit_id: UUID) -> bool:
        return any(unit.id == unit_id for unit in self.units)

    def update_address(self, address: Address) -> None:
        """Update property address."""
        if address is None:
            raise RequiredFieldError("address")

        self.address = address
        self.updated_at = datetime.now(timezone.utc)
