"""
Property type value object.
"""

from enum import Enum


class PropertyType(str, Enum):
    """Property type enumeration."""

    SINGLE_FAMILY = "SingleFamily"
    MULTI_FAMILY = "MultiFamily"
    APARTMENT = "Apartment"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"

    @property
    def supports_units(self) -> bool:
        """Check if the property is normally divided into rentable units."""
        return self != PropertyType.SINGLE_FAMILY
