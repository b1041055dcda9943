"""Review work orders use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from src.application.interfaces.repositories import (
    PropertyRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.config.logging import get_logger
from src.domain.entities.property import Property
from src.domain.entities.work_order import WorkOrder
from src.domain.value_objects.work_order_priority import WorkOrderPriority
from src.domain.value_objects.work_order_status import WorkOrderStatus

logger = get_logger(__name__)

UNKNOWN_PROPERTY = "Unknown"


@dataclass
class ReviewWorkOrdersRequest:
    """Request for the triage list of work orders."""

    status: WorkOrderStatus = WorkOrderStatus.NEW
    limit: int = 50


@dataclass
class WorkOrderReviewItem:
    """Work order as shown on the triage list."""

    work_order_id: UUID
    description: str
    status: WorkOrderStatus
    priority: WorkOrderPriority
    created_at: datetime
    property_name: str
    unit_number: Optional[str] = None


class ReviewWorkOrdersUseCase:
    """Read-only use case listing work orders for triage, most urgent first."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        property_repo: PropertyRepositoryInterface,
    ):
        self.work_order_repo = work_order_repo
        self.property_repo = property_repo

    async def execute(
        self, request: Optional[ReviewWorkOrdersRequest] = None
    ) -> List[WorkOrderReviewItem]:
        request = request or ReviewWorkOrdersRequest()

        work_orders = await self.work_order_repo.find_by_status(
            request.status, limit=request.limit
        )
        work_orders = sorted(
            work_orders, key=lambda wo: (-wo.priority.level, wo.created_at)
        )[: request.limit]

        properties: Dict[UUID, Optional[Property]] = {}
        items = []
        for work_order in work_orders:
            if work_order.property_id not in properties:
                properties[work_order.property_id] = await self.property_repo.get_by_id(
                    work_order.property_id
                )
            items.append(
                self._to_item(work_order, properties[work_order.property_id])
            )

        logger.info(
            "Work orders listed for review",
            status=str(request.status),
            count=len(items),
        )
        return items

    def _to_item(
        self, work_order: WorkOrder, property_: Optional[Property]
    ) -> WorkOrderReviewItem:
        unit_number = None
        if property_ and work_order.unit_id:
            unit_number = next(
                (
                    unit.unit_number
                    for unit in property_.units
                    if unit.id == work_order.unit_id
                ),
                None,
            )

        return WorkOrderReviewItem(
            work_order_id=work_order.id,
            description=work_order.description,
            status=work_order.status,
            priority=work_order.priority,
            created_at=work_order.created_at,
            property_name=property_.name if property_ else UNKNOWN_PROPERTY,
            unit_number=unit_number,
        )
