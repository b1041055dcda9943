"""Assign work order use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import (
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.domain_events import drain_domain_events
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.not_found_error import EntityNotFoundError
from src.domain.exceptions.state_error import PreconditionError
from src.domain.services.work_order_scheduling_service import (
    DEFAULT_APPOINTMENT_WINDOW,
    WorkOrderSchedulingService,
)
from src.domain.value_objects.date_range import DateRange
from src.domain.value_objects.money import Money

logger = get_logger(__name__)


@dataclass
class AssignWorkOrderRequest:
    """Request for assigning a work order to a vendor."""

    work_order_id: UUID
    vendor_id: UUID
    technician_id: Optional[UUID] = None
    scheduled_for: Optional[datetime] = None
    estimated_cost: Optional[Money] = None


class AssignWorkOrderUseCase:
    """Use case for assigning a work order to a vendor and technician."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        vendor_repo: VendorRepositoryInterface,
        transaction_service: TransactionServiceInterface,
        scheduling_service: Optional[WorkOrderSchedulingService] = None,
    ):
        self.work_order_repo = work_order_repo
        self.vendor_repo = vendor_repo
        self.transaction_service = transaction_service
        self.scheduling_service = scheduling_service or WorkOrderSchedulingService()

    async def execute(self, request: AssignWorkOrderRequest) -> WorkOrder:
        """Assign work order, rejecting vendors that are busy at the requested time."""
        work_order = await self.work_order_repo.get_by_id(request.work_order_id)
        if not work_order:
            raise EntityNotFoundError("Work order", request.work_order_id)

        vendor = await self.vendor_repo.get_by_id(request.vendor_id)
        if not vendor:
            raise EntityNotFoundError("Vendor", request.vendor_id)

        if request.technician_id and not vendor.has_technician(request.technician_id):
            raise PreconditionError(
                f"Technician {request.technician_id} does not work for vendor {vendor.name}"
            )

        if request.scheduled_for:
            requested_window = DateRange.starting_at(
                request.scheduled_for, DEFAULT_APPOINTMENT_WINDOW
            )
            existing = [
                other
                for other in await self.work_order_repo.find_by_vendor(vendor.id)
                if other.id != work_order.id
            ]
            if not self.scheduling_service.can_schedule_work_order(
                work_order, vendor, requested_window, existing
            ):
                logger.info(
                    "Vendor unavailable for requested window",
                    work_order_id=str(work_order.id),
                    vendor_id=str(vendor.id),
                    vendor_active=vendor.is_active,
                    window=str(requested_window),
                )
                raise PreconditionError(
                    f"Vendor {vendor.name} cannot take work order at {request.scheduled_for.isoformat()}"
                )
        elif not vendor.is_active:
            raise PreconditionError(f"Vendor {vendor.name} is not active")

        async with transaction_scope(
            self.transaction_service,
            "assign_work_order",
            work_order_id=str(work_order.id),
            vendor_id=str(vendor.id),
        ):
            work_order.assign_to_vendor(
                vendor.id, request.technician_id, request.scheduled_for
            )
            if request.estimated_cost is not None:
                work_order.update_estimated_cost(request.estimated_cost)

            await self.work_order_repo.update(work_order)

        drain_domain_events(work_order)

        logger.info(
            "Work order assigned",
            work_order_id=str(work_order.id),
            vendor_id=str(vendor.id),
            technician_id=str(request.technician_id) if request.technician_id else None,
            scheduled_for=(
                request.scheduled_for.isoformat() if request.scheduled_for else None
            ),
        )
        return work_order
