"""
Domain services package.
"""

from .vendor_ranking import FirstMatchRankingStrategy, VendorRankingStrategy
from .work_order_scheduling_service import (
    DEFAULT_APPOINTMENT_WINDOW,
    WorkOrderSchedulingService,
)

__all__ = [
    "DEFAULT_APPOINTMENT_WINDOW",
    "FirstMatchRankingStrategy",
    "VendorRankingStrategy",
    "WorkOrderSchedulingService",
]
