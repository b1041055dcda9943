"""
Domain value objects package.
"""

from .address import Address
from .date_range import DateRange
from .money import Money
from .property_type import PropertyType
from .recurrence_pattern import RecurrencePattern, add_months
from .vendor_specialization import VendorSpecialization
from .work_order_priority import WorkOrderPriority
from .work_order_status import WorkOrderStatus

__all__ = [
    "Address",
    "DateRange",
    "Money",
    "PropertyType",
    "RecurrencePattern",
    "VendorSpecialization",
    "WorkOrderPriority",
    "WorkOrderStatus",
    "add_months",
]
