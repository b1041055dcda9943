"""
Domain entities package.
"""

from .maintenance_schedule import MaintenanceSchedule
from .property import Property
from .technician import Technician
from .unit import Unit
from .vendor import Vendor
from .work_order import WorkOrder

__all__ = [
    "MaintenanceSchedule",
    "Property",
    "Technician",
    "Unit",
    "Vendor",
    "WorkOrder",
]
