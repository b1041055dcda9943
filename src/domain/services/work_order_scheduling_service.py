"""
Work order scheduling domain service.

Coordinates work orders and vendors across aggregate boundaries: conflict
detection for a requested appointment window, vendor selection, and the
target window for a given priority. Every operation is a pure function of
its arguments.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from src.domain.entities.vendor import Vendor
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.validation_error import RequiredFieldError
from src.domain.services.vendor_ranking import (
    FirstMatchRankingStrategy,
    VendorRankingStrategy,
)
from src.domain.value_objects.date_range import DateRange
from src.domain.value_objects.vendor_specialization import VendorSpecialization
from src.domain.value_objects.work_order_priority import WorkOrderPriority

# Time a scheduled visit is assumed to occupy a vendor.
DEFAULT_APPOINTMENT_WINDOW = timedelta(hours=4)

OPTIMAL_WINDOW_BY_PRIORITY = {
    WorkOrderPriority.EMERGENCY: timedelta(hours=4),
    WorkOrderPriority.HIGH: timedelta(hours=24),
    WorkOrderPriority.MEDIUM: timedelta(days=3),
    WorkOrderPriority.LOW: timedelta(days=7),
}
FALLBACK_OPTIMAL_WINDOW = timedelta(days=7)


class WorkOrderSchedulingService:
    """Stateless scheduling rules spanning work orders and vendors."""

    def __init__(self, ranking_strategy: Optional[VendorRankingStrategy] = None):
        self.ranking_strategy = ranking_strategy or FirstMatchRankingStrategy()

    def can_schedule_work_order(
        self,
        work_order: WorkOrder,
        vendor: Vendor,
        requested_window: DateRange,
        vendor_existing_work_orders: Optional[Iterable[WorkOrder]] = None,
    ) -> bool:
        """
        Check if a vendor can take a work order during the requested window.

        Emergencies skip conflict checking and only need an active vendor.
        Otherwise every existing order with a scheduled time is treated as
        occupying DEFAULT_APPOINTMENT_WINDOW from that time, and any overlap
        with the requested window is a conflict.

        Raises:
            RequiredFieldError: If work_order, vendor or requested_window is missing
        """
        if work_order is None:
            raise RequiredFieldError("work_order")
        if vendor is None:
            raise RequiredFieldError("vendor")
        if requested_window is None:
            raise RequiredFieldError("requested_window")

        if work_order.requires_immediate_attention():
            return vendor.is_active

        if not vendor.is_active:
            return False

        for existing in vendor_existing_work_orders or ():
            if existing.scheduled_for is None:
                continue
            occupied = DateRange.starting_at(
                existing.scheduled_for, DEFAULT_APPOINTMENT_WINDOW
            )
            if occupied.overlaps(requested_window):
                return False

        return True

    def find_best_vendor(
        self,
        work_order: WorkOrder,
        required_specialization: VendorSpecialization,
        available_vendors: Iterable[Vendor],
        preferred_window: Optional[DateRange] = None,
    ) -> Optional[Vendor]:
        """
        Pick a vendor for the work order among those qualified for it.

        Emergencies take the first qualified vendor. Other work orders are
        handed to the ranking strategy.
        """
        if work_order is None:
            raise RequiredFieldError("work_order")
        if available_vendors is None:
            raise RequiredFieldError("available_vendors")

        qualified: List[Vendor] = [
            vendor
            for vendor in available_vendors
            if vendor.can_handle_work_order(required_specialization)
        ]
        if not qualified:
            return None

        if work_order.requires_immediate_attention():
            return qualified[0]

        return self.ranking_strategy.select(work_order, qualified, preferred_window)

    def calculate_optimal_window(self, work_order: WorkOrder) -> DateRange:
        """Get the window, starting now, in which the work order should be done."""
        if work_order is None:
            raise RequiredFieldError("work_order")

        now = datetime.now(timezone.utc)
        length = OPTIMAL_WINDOW_BY_PRIORITY.get(
            work_order.priority, FALLBACK_OPTIMAL_WINDOW
        )
        return DateRange.starting_at(now, length)
