"""
Address value object.
"""

from dataclasses import dataclass

from src.domain.exceptions.validation_error import InvalidArgumentError


@dataclass(frozen=True)
class Address:
    """Address value object."""

    street: str
    city: str
    state: str
    postal_code: str
    country: str = "USA"

    def __post_init__(self):
        """Validate address fields."""
        if not self.street or not self.street.strip():
            raise InvalidArgumentError("Street cannot be empty")
        if not self.city or not self.city.strip():
            raise InvalidArgumentError("City cannot be empty")
        if not self.state or not self.state.strip():
            raise InvalidArgumentError("State cannot be empty")
        if not self.postal_code or not self.postal_code.strip():
            raise InvalidArgumentError("Postal code cannot be empty")
        if not self.country:
            object.__setattr__(self, "country", "USA")

    @property
    def full_address(self) -> str:
        """Get formatted full address."""
        return f"{self.street}, {self.city}, {self.state} {self.postal_code}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
        }

    def __str__(self) -> str:
        return self.full_address
