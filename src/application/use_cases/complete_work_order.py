"""Complete work order use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import WorkOrderRepositoryInterface
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.cost_overrun import CostOverrunPolicy, CostVariance
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.config.settings import settings
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.not_found_error import EntityNotFoundError
from src.domain.value_objects.money import Money

logger = get_logger(__name__)


@dataclass
class CompleteWorkOrderRequest:
    """Request for completing a work order."""

    work_order_id: UUID
    actual_cost: Money
    completion_notes: Optional[str] = None


@dataclass
class CompleteWorkOrderResult:
    """Result of work order completion."""

    work_order: WorkOrder
    cost_variance: Optional[CostVariance]
    exceeds_estimate: bool


class CompleteWorkOrderUseCase:
    """Use case for closing out a work order with its actual cost."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        transaction_service: TransactionServiceInterface,
        cost_overrun_policy: Optional[CostOverrunPolicy] = None,
    ):
        self.work_order_repo = work_order_repo
        self.transaction_service = transaction_service
        self.cost_overrun_policy = cost_overrun_policy or CostOverrunPolicy(
            settings.COST_OVERRUN_THRESHOLD
        )

    async def execute(self, request: CompleteWorkOrderRequest) -> CompleteWorkOrderResult:
        """Complete the work order; a cost overrun is reported, never blocking."""
        work_order = await self.work_order_repo.get_by_id(request.work_order_id)
        if not work_order:
            raise EntityNotFoundError("Work order", request.work_order_id)

        async with transaction_scope(
            self.transaction_service,
            "complete_work_order",
            work_order_id=str(request.work_order_id),
        ):
            work_order.complete(request.actual_cost, request.completion_notes)
            await self.work_order_repo.update(work_order)

        variance = self.cost_overrun_policy.evaluate(work_order)
        exceeds_estimate = self.cost_overrun_policy.is_overrun(variance)

        if exceeds_estimate:
            logger.warning(
                "Work order completed over estimate",
                work_order_id=str(work_order.id),
                actual_cost=str(work_order.actual_cost),
                estimated_cost=str(work_order.estimated_cost),
                overrun_percentage=f"{variance.percentage:.2f}",
            )

        logger.info(
            "Work order completed",
            work_order_id=str(work_order.id),
            vendor_id=str(work_order.assigned_vendor_id),
            actual_cost=str(work_order.actual_cost),
        )

        return CompleteWorkOrderResult(
            work_order=work_order,
            cost_variance=variance,
            exceeds_estimate=exceeds_estimate,
        )
