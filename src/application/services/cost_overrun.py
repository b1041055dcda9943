"""
Cost overrun policy applied when a work order is completed.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.domain.entities.work_order import WorkOrder


@dataclass(frozen=True)
class CostVariance:
    """How far the actual cost of a work order landed from its estimate."""

    estimated_amount: Decimal
    actual_amount: Decimal
    ratio: Decimal  # (actual - estimated) / estimated

    @property
    def percentage(self) -> Decimal:
        return self.ratio * 100


class CostOverrunPolicy:
    """Flags completed work orders whose actual cost exceeds the estimate."""

    def __init__(self, threshold: float = 0.20):
        self.threshold = Decimal(str(threshold))

    def evaluate(self, work_order: WorkOrder) -> Optional[CostVariance]:
        """
        Compare actual and estimated cost.

        Returns None when there is nothing to compare: no actual cost, a zero
        estimate, or amounts in different currencies.
        """
        estimated = work_order.estimated_cost
        actual = work_order.actual_cost
        if actual is None or estimated is None or estimated.amount <= 0:
            return None
        if actual.currency != estimated.currency:
            return None

        ratio = (actual.amount - estimated.amount) / estimated.amount
        return CostVariance(
            estimated_amount=estimated.amount,
            actual_amount=actual.amount,
            ratio=ratio,
        )

    def is_overrun(self, variance: Optional[CostVariance]) -> bool:
        """Check if a variance is above the advisory threshold."""
        return variance is not None and variance.ratio > self.threshold
