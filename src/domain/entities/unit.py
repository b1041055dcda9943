"""
Unit domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions.validation_error import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.domain.shared.guards import is_blank


@dataclass
class Unit:
    """Rentable unit within a property."""

    property_id: UUID
    unit_number: str
    bedrooms: int
    square_feet: Decimal
    id: UUID = field(default_factory=uuid4)
    is_occupied: bool = False
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate unit data."""
        if is_blank(self.unit_number):
            raise RequiredFieldError("unit_number")
        if self.bedrooms is None or self.bedrooms < 0:
            raise InvalidArgumentError("Bedrooms cannot be negative")
        if self.square_feet is None or self.square_feet <= 0:
            raise InvalidArgumentError("Square feet must be positive")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @classmethod
    def create(
        cls, property_id: UUID, unit_number: str, bedrooms: int, square_feet: Decimal
    ) -> "Unit":
        return cls(
            property_id=property_id,
            unit_number=unit_number,
            bedrooms=bedrooms,
            square_feet=square_feet,
        )

    def set_occupancy(self, is_occupied: bool) -> None:
        self.is_occupied = is_occupied
