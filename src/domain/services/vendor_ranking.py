"""
Vendor ranking strategies used when choosing among qualified vendors.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from src.domain.entities.vendor import Vendor
from src.domain.entities.work_order import WorkOrder
from src.domain.value_objects.date_range import DateRange


class VendorRankingStrategy(ABC):
    """Picks one vendor out of a list that already passed qualification."""

    @abstractmethod
    def select(
        self,
        work_order: WorkOrder,
        candidates: Sequence[Vendor],
        preferred_window: Optional[DateRange] = None,
    ) -> Optional[Vendor]:
        """Return the chosen vendor, or None to decline all candidates."""
        pass


class FirstMatchRankingStrategy(VendorRankingStrategy):
    """Keeps the caller's ordering and returns the first candidate."""

    def select(
        self,
        work_order: WorkOrder,
        candidates: Sequence[Vendor],
        preferred_window: Optional[DateRange] = None,
    ) -> Optional[Vendor]:
        return candidates[0] if candidates else None
