"""
Unit tests for ProcessDueSchedulesUseCase.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from freezegun import freeze_time
from structlog.testing import capture_logs

from src.application.use_cases.process_due_schedules import ProcessDueSchedulesUseCase
from src.domain.entities.maintenance_schedule import MaintenanceSchedule
from src.domain.entities.work_order import WorkOrder
from src.domain.value_objects.recurrence_pattern import RecurrencePattern
from src.domain.value_objects.vendor_specialization import VendorSpecialization
from src.domain.value_objects.work_order_priority import WorkOrderPriority
from src.domain.value_objects.work_order_status import WorkOrderStatus

NOW = datetime(2030, 3, 31, 12, 0, tzinfo=timezone.utc)


def make_schedule(next_date, recurrence=RecurrencePattern.MONTHLY, unit_id=None):
    return MaintenanceSchedule.create(
        property_id=uuid4(),
        unit_id=unit_id,
        task_description="Replace HVAC filters",
        recurrence=recurrence,
        required_specialization=VendorSpecialization.HVAC,
        next_scheduled_date=next_date,
    )


class TestProcessDueSchedulesUseCase:
    """Test cases for ProcessDueSchedulesUseCase."""

    @pytest.fixture(autouse=True)
    def frozen_clock(self):
        with freeze_time(NOW):
            yield

    @pytest.fixture
    def use_case(
        self,
        mock_schedule_repository,
        mock_work_order_repository,
        mock_vendor_repository,
        mock_transaction_service,
    ):
        return ProcessDueSchedulesUseCase(
            schedule_repo=mock_schedule_repository,
            work_order_repo=mock_work_order_repository,
            vendor_repo=mock_vendor_repository,
            transaction_service=mock_transaction_service,
            batch_size=25,
        )

    @pytest.mark.asyncio
    async def test_due_schedule_opens_work_order(
        self,
        use_case,
        mock_schedule_repository,
        mock_work_order_repository,
        mock_transaction_service,
    ):
        unit_id = uuid4()
        due = make_schedule(datetime(2030, 1, 31, 9, 0, tzinfo=timezone.utc), unit_id=unit_id)
        mock_schedule_repository.find_active.return_value = [due]

        created = await use_case.execute()

        assert len(created) == 1
        work_order = created[0]
        assert work_order.property_id == due.property_id
        assert work_order.unit_id == unit_id
        assert work_order.description == "Replace HVAC filters"
        assert work_order.priority == WorkOrderPriority.MEDIUM
        assert work_order.status == WorkOrderStatus.NEW
        assert work_order.domain_events == ()

        assert due.next_scheduled_date == datetime(2030, 2, 28, 9, 0, tzinfo=timezone.utc)

        mock_schedule_repository.find_active.assert_called_once_with(limit=25)
        mock_work_order_repository.create.assert_called_once_with(work_order)
        mock_schedule_repository.update.assert_called_once_with(due)
        mock_transaction_service.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_preferred_vendor_is_assigned(
        self,
        use_case,
        plumbing_vendor,
        mock_schedule_repository,
        mock_vendor_repository,
    ):
        due_date = datetime(2030, 3, 30, 8, 0, tzinfo=timezone.utc)
        due = make_schedule(due_date, recurrence=RecurrencePattern.WEEKLY)
        due.set_preferred_vendor(plumbing_vendor.id)
        mock_schedule_repository.find_active.return_value = [due]
        mock_vendor_repository.get_by_id.return_value = plumbing_vendor

        [work_order] = await use_case.execute()

        assert work_order.status == WorkOrderStatus.ASSIGNED
        assert work_order.assigned_vendor_id == plumbing_vendor.id
        assert work_order.scheduled_for == due_date
        assert due.next_scheduled_date == datetime(2030, 4, 6, 8, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_inactive_preferred_vendor_leaves_work_order_new(
        self,
        use_case,
        plumbing_vendor,
        mock_schedule_repository,
        mock_vendor_repository,
    ):
        plumbing_vendor.deactivate()
        due = make_schedule(datetime(2030, 3, 30, 8, 0, tzinfo=timezone.utc))
        due.set_preferred_vendor(plumbing_vendor.id)
        mock_schedule_repository.find_active.return_value = [due]
        mock_vendor_repository.get_by_id.return_value = plumbing_vendor

        with capture_logs() as logs:
            [work_order] = await use_case.execute()

        assert work_order.status == WorkOrderStatus.NEW
        assert work_order.assigned_vendor_id is None
        assert due.next_scheduled_date == datetime(2030, 4, 30, 8, 0, tzinfo=timezone.utc)
        assert "Preferred vendor unavailable, leaving work order unassigned" in [
            log["event"] for log in logs
        ]

    @pytest.mark.asyncio
    async def test_busy_preferred_vendor_leaves_work_order_new(
        self,
        use_case,
        plumbing_vendor,
        mock_schedule_repository,
        mock_work_order_repository,
        mock_vendor_repository,
    ):
        due_date = datetime(2030, 3, 30, 8, 0, tzinfo=timezone.utc)
        booked = WorkOrder.create(uuid4(), None, "Boiler service", WorkOrderPriority.HIGH)
        booked.assign_to_vendor(plumbing_vendor.id, scheduled_for=due_date + timedelta(hours=2))
        due = make_schedule(due_date)
        due.set_preferred_vendor(plumbing_vendor.id)
        mock_schedule_repository.find_active.return_value = [due]
        mock_vendor_repository.get_by_id.return_value = plumbing_vendor
        mock_work_order_repository.find_by_vendor.return_value = [booked]

        [work_order] = await use_case.execute()

        assert work_order.status == WorkOrderStatus.NEW
        mock_work_order_repository.find_by_vendor.assert_called_once_with(plumbing_vendor.id)

    @pytest.mark.asyncio
    async def test_same_vendor_not_double_booked_within_batch(
        self,
        use_case,
        plumbing_vendor,
        mock_schedule_repository,
        mock_vendor_repository,
    ):
        due_date = datetime(2030, 3, 30, 8, 0, tzinfo=timezone.utc)
        first = make_schedule(due_date)
        second = make_schedule(due_date)
        for schedule in (first, second):
            schedule.set_preferred_vendor(plumbing_vendor.id)
        mock_schedule_repository.find_active.return_value = [first, second]
        mock_vendor_repository.get_by_id.return_value = plumbing_vendor

        created = await use_case.execute()

        assert [work_order.status for work_order in created] == [
            WorkOrderStatus.ASSIGNED,
            WorkOrderStatus.NEW,
        ]

    @pytest.mark.asyncio
    async def test_missing_preferred_vendor_leaves_work_order_new(
        self, use_case, mock_schedule_repository, mock_vendor_repository
    ):
        due = make_schedule(datetime(2030, 3, 30, 8, 0, tzinfo=timezone.utc))
        due.set_preferred_vendor(uuid4())
        mock_schedule_repository.find_active.return_value = [due]
        mock_vendor_repository.get_by_id.return_value = None

        [work_order] = await use_case.execute()

        assert work_order.status == WorkOrderStatus.NEW

    @pytest.mark.asyncio
    async def test_only_due_schedules_are_processed(
        self, use_case, mock_schedule_repository, mock_work_order_repository
    ):
        due = make_schedule(datetime(2030, 3, 31, 12, 0, tzinfo=timezone.utc))
        upcoming = make_schedule(datetime(2030, 4, 1, tzinfo=timezone.utc))
        paused = make_schedule(datetime(2030, 1, 1, tzinfo=timezone.utc))
        paused.deactivate()
        mock_schedule_repository.find_active.return_value = [due, upcoming, paused]

        created = await use_case.execute()

        assert [work_order.property_id for work_order in created] == [due.property_id]
        assert upcoming.next_scheduled_date == datetime(2030, 4, 1, tzinfo=timezone.utc)
        assert paused.next_scheduled_date == datetime(2030, 1, 1, tzinfo=timezone.utc)
        assert mock_work_order_repository.create.call_count == 1

    @pytest.mark.asyncio
    async def test_overdue_schedule_advances_one_period(
        self, use_case, mock_schedule_repository
    ):
        overdue = make_schedule(
            datetime(2029, 12, 1, tzinfo=timezone.utc), recurrence=RecurrencePattern.MONTHLY
        )
        mock_schedule_repository.find_active.return_value = [overdue]

        await use_case.execute()

        assert overdue.next_scheduled_date == datetime(2030, 1, 1, tzinfo=timezone.utc)
        assert overdue.is_due() is True

    @pytest.mark.asyncio
    async def test_nothing_due(
        self,
        use_case,
        mock_schedule_repository,
        mock_work_order_repository,
        mock_transaction_service,
    ):
        mock_schedule_repository.find_active.return_value = [
            make_schedule(datetime(2030, 5, 1, tzinfo=timezone.utc))
        ]

        assert await use_case.execute() == []

        mock_work_order_repository.create.assert_not_called()
        mock_transaction_service.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_rolls_back_batch(
        self,
        use_case,
        mock_schedule_repository,
        mock_work_order_repository,
        mock_transaction_service,
    ):
        mock_schedule_repository.find_active.return_value = [
            make_schedule(datetime(2030, 3, 1, tzinfo=timezone.utc)),
            make_schedule(datetime(2030, 3, 2, tzinfo=timezone.utc)),
        ]
        mock_work_order_repository.create.side_effect = [None, Exception("Database error")]

        with pytest.raises(Exception, match="Database error"):
            await use_case.execute()

        mock_transaction_service.rollback.assert_called_once()
        mock_transaction_service.commit.assert_not_called()
