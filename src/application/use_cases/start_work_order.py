"""Start work order use case."""

from uuid import UUID

from src.application.interfaces.repositories import WorkOrderRepositoryInterface
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.domain.entities.work_order import WorkOrder
from src.domain.exceptions.not_found_error import EntityNotFoundError

logger = get_logger(__name__)


class StartWorkOrderUseCase:
    """Use case for recording that the assigned vendor started on site."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.work_order_repo = work_order_repo
        self.transaction_service = transaction_service

    async def execute(self, work_order_id: UUID) -> WorkOrder:
        work_order = await self.work_order_repo.get_by_id(work_order_id)
        if not work_order:
            raise EntityNotFoundError("Work order", work_order_id)

        async with transaction_scope(
            self.transaction_service,
            "start_work_order",
            work_order_id=str(work_order_id),
        ):
            work_order.start_work()
            await self.work_order_repo.update(work_order)

        logger.info(
            "Work order started",
            work_order_id=str(work_order.id),
            vendor_id=str(work_order.assigned_vendor_id),
        )
        return work_order
