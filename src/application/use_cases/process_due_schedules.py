"""Process due maintenance schedules use case."""

from typing import List, Optional

from src.application.interfaces.repositories import (
    MaintenanceScheduleRepositoryInterface,
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.application.interfaces.services import TransactionServiceInterface
from src.application.services.domain_events import drain_domain_events
from src.application.services.transaction_scope import transaction_scope
from src.config.logging import get_logger
from src.config.settings import settings
from src.domain.entities.maintenance_schedule import MaintenanceSchedule
from src.domain.entities.work_order import WorkOrder
from src.domain.services.work_order_scheduling_service import (
    DEFAULT_APPOINTMENT_WINDOW,
    WorkOrderSchedulingService,
)
from src.domain.value_objects.date_range import DateRange
from src.domain.value_objects.work_order_priority import WorkOrderPriority

logger = get_logger(__name__)


class ProcessDueSchedulesUseCase:
    """Use case turning due preventive maintenance schedules into work orders."""

    def __init__(
        self,
        schedule_repo: MaintenanceScheduleRepositoryInterface,
        work_order_repo: WorkOrderRepositoryInterface,
        vendor_repo: VendorRepositoryInterface,
        transaction_service: TransactionServiceInterface,
        scheduling_service: Optional[WorkOrderSchedulingService] = None,
        priority: WorkOrderPriority = WorkOrderPriority.MEDIUM,
        batch_size: Optional[int] = None,
    ):
        self.schedule_repo = schedule_repo
        self.work_order_repo = work_order_repo
        self.vendor_repo = vendor_repo
        self.transaction_service = transaction_service
        self.scheduling_service = scheduling_service or WorkOrderSchedulingService()
        self.priority = priority
        self.batch_size = batch_size or settings.DUE_SCHEDULE_BATCH_SIZE

    async def execute(self) -> List[WorkOrder]:
        """
        Open one work order per due schedule and advance each schedule.

        A schedule that is several periods behind still advances a single
        period per run, so it stays due until it has caught up. The preferred
        vendor gets the work order only when it is active and free at the due
        time; otherwise the work order stays New for manual assignment.
        """
        schedules = await self.schedule_repo.find_active(limit=self.batch_size)
        due = [schedule for schedule in schedules if schedule.is_due()]

        logger.info(
            "Processing due maintenance schedules",
            active_schedules=len(schedules),
            due_schedules=len(due),
        )
        if not due:
            return []

        created: List[WorkOrder] = []
        async with transaction_scope(
            self.transaction_service,
            "process_due_schedules",
            due_schedules=len(due),
        ):
            for schedule in due:
                work_order = WorkOrder.create(
                    property_id=schedule.property_id,
                    unit_id=schedule.unit_id,
                    description=schedule.task_description,
                    priority=self.priority,
                )
                if schedule.preferred_vendor_id:
                    await self._assign_preferred_vendor(work_order, schedule, created)
                await self.work_order_repo.create(work_order)

                schedule.update_next_scheduled_date()
                await self.schedule_repo.update(schedule)

                created.append(work_order)

                logger.debug(
                    "Maintenance schedule processed",
                    schedule_id=str(schedule.id),
                    work_order_id=str(work_order.id),
                    next_scheduled_date=schedule.next_scheduled_date.isoformat(),
                )

        for work_order in created:
            drain_domain_events(work_order)

        logger.info(
            "Due maintenance schedules processed", work_orders_created=len(created)
        )
        return created

    async def _assign_preferred_vendor(
        self,
        work_order: WorkOrder,
        schedule: MaintenanceSchedule,
        opened_in_batch: List[WorkOrder],
    ) -> None:
        vendor = await self.vendor_repo.get_by_id(schedule.preferred_vendor_id)
        if vendor is None:
            logger.warning(
                "Preferred vendor not found, leaving work order unassigned",
                schedule_id=str(schedule.id),
                vendor_id=str(schedule.preferred_vendor_id),
            )
            return

        existing = list(await self.work_order_repo.find_by_vendor(vendor.id))
        existing += [
            other
            for other in opened_in_batch
            if other.assigned_vendor_id == vendor.id
        ]
        window = DateRange.starting_at(
            schedule.next_scheduled_date, DEFAULT_APPOINTMENT_WINDOW
        )
        if not self.scheduling_service.can_schedule_work_order(
            work_order, vendor, window, existing
        ):
            logger.warning(
                "Preferred vendor unavailable, leaving work order unassigned",
                schedule_id=str(schedule.id),
                vendor_id=str(vendor.id),
                vendor_active=vendor.is_active,
                window=str(window),
            )
            return

        work_order.assign_to_vendor(vendor.id, scheduled_for=schedule.next_scheduled_date)
