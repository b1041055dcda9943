"""
Property Maintenance Service.

Work order lifecycle, vendor scheduling and preventive maintenance for
residential and commercial properties.
"""

__version__ = "0.1.0"
__description__ = "Property Maintenance Service"

from .config import settings

__all__ = [
    "settings",
]
