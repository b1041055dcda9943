"""Cancel work order use case."""

from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import WorkOrderRepositoryInterface
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.not_found_error import EntityNotFoundError

logger = get_logger(__name__)


class CancelWorkOrderUseCase:
    """Use case for cancelling a work order before work starts."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.work_order_repo = work_order_repo
        self.transaction_service = transaction_service

    async def execute(
        self, work_order_id: UUID, reason: Optional[str] = None
    ) -> WorkOrder:
        work_order = await self.work_order_repo.get_by_id(work_order_id)
        if not work_order:
            raise EntityNotFoundError("Work order", work_order_id)

        previous_status = work_order.status

        async with transaction_scope(
            self.transaction_service,
            "cancel_work_order",
            work_order_id=str(work_order_id),
        ):
            work_order.cancel()
            await self.work_order_repo.update(work_order)

        logger.info(
            "Work order cancelled",
            work_order_id=str(work_order.id),
            previous_status=str(previous_status),
            reason=reason,
        )
        return work_order
