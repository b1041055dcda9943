"""
Technician domain entity.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions.validation_error import RequiredFieldError
from src.domain.shared.guards import is_blank


class Technician:
    """Technician entity representing a field worker employed by a vendor."""

    def __init__(
        self,
        vendor_id: UUID,
        name: str,
        phone_number: str,
        email: str,
        id: Optional[UUID] = None,
        is_available: bool = True,
        created_at: Optional[datetime] = None,
    ):
        if is_blank(name):
            raise RequiredFieldError("name")
        if is_blank(phone_number):
            raise RequiredFieldError("phone_number")
        if is_blank(email):
            raise RequiredFieldError("email")

        self.id = id or uuid4()
        self.vendor_id = vendor_id
        self.name = name
        self.phone_number = phone_number
        self.email = email
        self.is_available = is_available
        self.created_at = created_at or datetime.now(timezone.utc)

    def set_availability(self, is_available: bool) -> None:
        self.is_available = is_available

    def update_contact_info(self, phone_number: str, email: str) -> None:
        """Update technician contact information."""
        if is_blank(phone_number):
            raise RequiredFieldError("phone_number")
        if is_blank(email):
            raise RequiredFieldError("email")

        self.phone_number = phone_number
        self.email = email

    def to_dict(self) -> dict:
        """Convert technician to dictionary."""
        return {
            "id": str(self.id),
            "vendor_id": str(self.vendor_id),
            "name": self.name,
            "phone_number": self.phone_number,
            "email": self.email,
            "is_available": self.is_available,
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        return f"Technician(id={self.id!s}, name={self.name!r}, vendor_id={self.vendor_id!s})"
