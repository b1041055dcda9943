"""Create work order use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import (
    PropertyRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.domain_events import drain_domain_events
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.not_found_error import EntityNotFoundError
from src.domain.exceptions.state_error import PreconditionError
from src.domain.value_objects.money import Money
from src.domain.value_objects.work_order_priority import WorkOrderPriority

logger = get_logger(__name__)


@dataclass
class CreateWorkOrderRequest:
    """Request for opening a work order."""

    property_id: UUID
    description: str
    priority: WorkOrderPriority
    unit_id: Optional[UUID] = None
    estimated_cost: Optional[Money] = None


class CreateWorkOrderUseCase:
    """Use case for opening a maintenance work order on a property."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        property_repo: PropertyRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.work_order_repo = work_order_repo
        self.property_repo = property_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateWorkOrderRequest) -> WorkOrder:
        """Create a new work order."""
        logger.info(
            "Creating work order",
            property_id=str(request.property_id),
            unit_id=str(request.unit_id) if request.unit_id else None,
            priority=str(request.priority),
        )

        # 1. Validate property and unit
        property_ = await self.property_repo.get_by_id(request.property_id)
        if not property_:
            raise EntityNotFoundError("Property", request.property_id)

        if request.unit_id and not property_.has_unit(request.unit_id):
            raise PreconditionError(
                f"Unit {request.unit_id} does not belong to property {property_.name}"
            )

        # 2. Open and persist
        async with transaction_scope(
            self.transaction_service,
            "create_work_order",
            property_id=str(request.property_id),
        ):
            work_order = WorkOrder.create(
                property_id=request.property_id,
                unit_id=request.unit_id,
                description=request.description,
                priority=request.priority,
            )
            if request.estimated_cost is not None:
                work_order.update_estimated_cost(request.estimated_cost)

            await self.work_order_repo.create(work_order)

        drain_domain_events(work_order)

        if work_order.requires_immediate_attention():
            logger.warning(
                "Emergency work order opened",
                work_order_id=str(work_order.id),
                property_id=str(work_order.property_id),
            )

        logger.info(
            "Work order created",
            work_order_id=str(work_order.id),
            status=str(work_order.status),
        )
        return work_order
