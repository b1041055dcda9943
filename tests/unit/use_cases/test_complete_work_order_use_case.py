"""
Unit tests for CompleteWorkOrderUseCase.
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from structlog.testing import capture_logs

from src.application.services.cost_overrun import CostOverrunPolicy
from src.application.use_cases.complete_work_order import (
    CompleteWorkOrderRequest,
    CompleteWorkOrderResult,
    CompleteWorkOrderUseCase,
)
from src.domain.exceptions.not_found_error import EntityNotFoundError
from src.domain.exceptions.state_error import InvalidStateError
from src.domain.value_objects.money import Money
from src.domain.value_objects.work_order_status import WorkOrderStatus


class TestCompleteWorkOrderUseCase:
    """Test cases for CompleteWorkOrderUseCase."""

    @pytest.fixture
    def use_case(self, mock_work_order_repository, mock_transaction_service):
        """Create CompleteWorkOrderUseCase instance with mocked dependencies."""
        return CompleteWorkOrderUseCase(
            work_order_repo=mock_work_order_repository,
            transaction_service=mock_transaction_service,
            cost_overrun_policy=CostOverrunPolicy(threshold=0.20),
        )

    @pytest.fixture
    def in_progress_work_order(self, new_work_order, mock_work_order_repository):
        new_work_order.assign_to_vendor(uuid4())
        new_work_order.start_work()
        new_work_order.pull_domain_events()
        mock_work_order_repository.get_by_id.return_value = new_work_order
        return new_work_order

    @pytest.mark.asyncio
    async def test_complete_within_estimate(
        self,
        use_case,
        in_progress_work_order,
        mock_work_order_repository,
        mock_transaction_service,
    ):
        with capture_logs() as logs:
            result = await use_case.execute(
                CompleteWorkOrderRequest(
                    work_order_id=in_progress_work_order.id,
                    actual_cost=Money(Decimal("110.00")),
                    completion_notes="Replaced trap and washer",
                )
            )

        assert isinstance(result, CompleteWorkOrderResult)
        assert result.work_order.status == WorkOrderStatus.COMPLETED
        assert result.work_order.completion_notes == "Replaced trap and washer"
        assert result.work_order.completed_at is not None
        assert result.exceeds_estimate is False
        assert result.cost_variance.ratio == Decimal("0.1")
        assert not [log for log in logs if log["log_level"] == "warning"]

        mock_work_order_repository.update.assert_called_once_with(in_progress_work_order)
        mock_transaction_service.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_complete_over_estimate_logs_warning(
        self, use_case, in_progress_work_order, mock_transaction_service
    ):
        with capture_logs() as logs:
            result = await use_case.execute(
                CompleteWorkOrderRequest(
                    work_order_id=in_progress_work_order.id,
                    actual_cost=Money(Decimal("150.00")),
                )
            )

        assert result.work_order.status == WorkOrderStatus.COMPLETED
        assert result.exceeds_estimate is True
        mock_transaction_service.commit.assert_called_once()

        warnings = [log for log in logs if log["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["event"] == "Work order completed over estimate"
        assert warnings[0]["work_order_id"] == str(in_progress_work_order.id)
        assert warnings[0]["overrun_percentage"] == "50.00"

    @pytest.mark.asyncio
    async def test_zero_estimate_never_warns(
        self, use_case, new_work_order, mock_work_order_repository
    ):
        new_work_order.update_estimated_cost(Money.zero())
        new_work_order.assign_to_vendor(uuid4())
        new_work_order.start_work()
        mock_work_order_repository.get_by_id.return_value = new_work_order

        with capture_logs() as logs:
            result = await use_case.execute(
                CompleteWorkOrderRequest(
                    work_order_id=new_work_order.id,
                    actual_cost=Money(Decimal("5000.00")),
                )
            )

        assert result.exceeds_estimate is False
        assert result.cost_variance is None
        assert not [log for log in logs if log["log_level"] == "warning"]

    @pytest.mark.asyncio
    async def test_complete_assigned_work_order_rejected(
        self,
        use_case,
        new_work_order,
        mock_work_order_repository,
        mock_transaction_service,
    ):
        new_work_order.assign_to_vendor(uuid4())
        mock_work_order_repository.get_by_id.return_value = new_work_order

        with pytest.raises(InvalidStateError):
            await use_case.execute(
                CompleteWorkOrderRequest(
                    work_order_id=new_work_order.id,
                    actual_cost=Money(Decimal("100.00")),
                )
            )

        assert new_work_order.status == WorkOrderStatus.ASSIGNED
        assert new_work_order.actual_cost is None
        mock_work_order_repository.update.assert_not_called()
        mock_transaction_service.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_work_order_not_found(self, use_case, mock_work_order_repository):
        mock_work_order_repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await use_case.execute(
                CompleteWorkOrderRequest(
                    work_order_id=uuid4(), actual_cost=Money(Decimal("1.00"))
                )
            )

    def test_default_policy_uses_configured_threshold(
        self, mock_work_order_repository, mock_transaction_service
    ):
        use_case = CompleteWorkOrderUseCase(
            work_order_repo=mock_work_order_repository,
            transaction_service=mock_transaction_service,
        )

        assert use_case.cost_overrun_policy.threshold == Decimal("0.2")
