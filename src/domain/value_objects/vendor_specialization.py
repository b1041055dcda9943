"""
Vendor specialization value object.
"""

from enum import Enum


class VendorSpecialization(str, Enum):
    """Category of maintenance work a vendor is qualified to perform."""

    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    HVAC = "HVAC"
    CARPENTRY = "Carpentry"
    PAINTING = "Painting"
    LANDSCAPING = "Landscaping"
    GENERAL_MAINTENANCE = "GeneralMaintenance"
    APPLIANCE = "Appliance"
    ROOFING = "Roofing"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return {
            VendorSpecialization.HVAC: "HVAC",
            VendorSpecialization.GENERAL_MAINTENANCE: "General Maintenance",
        }.get(self, self.value)
