"""
Domain package.
"""

from .entities import *
from .events import *
from .exceptions import *
from .services import *
from .value_objects import *

__all__ = [
    # Entities
    "MaintenanceSchedule",
    "Property",
    "Technician",
    "Unit",
    "Vendor",
    "WorkOrder",

    # Events
    "DomainEvent",
    "WorkOrderAssigned",
    "WorkOrderCreated",

    # Exceptions
    "DomainError",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "InvalidStateError",
    "PreconditionError",
    "RequiredFieldError",

    # Services
    "DEFAULT_APPOINTMENT_WINDOW",
    "FirstMatchRankingStrategy",
    "VendorRankingStrategy",
    "WorkOrderSchedulingService",

    # Value Objects
    "Address",
    "DateRange",
    "Money",
    "PropertyType",
    "RecurrencePattern",
    "VendorSpecialization",
    "WorkOrderPriority",
    "WorkOrderStatus",
]
