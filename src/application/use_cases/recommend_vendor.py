"""Recommend vendor use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.application.interfaces.repositories import (
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.config.logging import get_logger
from src.domain.entities.vendor import Vendor
from src.domain.exceptions.not_found_error import EntityNotFoundError
from src.domain.services.work_order_scheduling_service import (
    WorkOrderSchedulingService,
)
from src.domain.value_objects.date_range import DateRange
from src.domain.value_objects.vendor_specialization import VendorSpecialization

logger = get_logger(__name__)


@dataclass
class VendorRecommendation:
    """Suggested vendor and the window the work should fall in."""

    vendor: Optional[Vendor]
    window: DateRange


class RecommendVendorUseCase:
    """Read-only use case suggesting a vendor for an open work order."""

    def __init__(
        self,
        work_order_repo: WorkOrderRepositoryInterface,
        vendor_repo: VendorRepositoryInterface,
        scheduling_service: Optional[WorkOrderSchedulingService] = None,
    ):
        self.work_order_repo = work_order_repo
        self.vendor_repo = vendor_repo
        self.scheduling_service = scheduling_service or WorkOrderSchedulingService()

    async def execute(
        self, work_order_id: UUID, required_specialization: VendorSpecialization
    ) -> VendorRecommendation:
        work_order = await self.work_order_repo.get_by_id(work_order_id)
        if not work_order:
            raise EntityNotFoundError("Work order", work_order_id)

        window = self.scheduling_service.calculate_optimal_window(work_order)
        candidates = await self.vendor_repo.find_active_by_specialization(
            required_specialization
        )
        vendor = self.scheduling_service.find_best_vendor(
            work_order, required_specialization, candidates, window
        )

        if vendor is None:
            logger.warning(
                "No vendor available for work order",
                work_order_id=str(work_order_id),
                specialization=required_specialization.value,
                candidates=len(candidates),
            )
        else:
            logger.info(
                "Vendor recommended for work order",
                work_order_id=str(work_order_id),
                vendor_id=str(vendor.id),
                window=str(window),
            )

        return VendorRecommendation(vendor=vendor, window=window)
