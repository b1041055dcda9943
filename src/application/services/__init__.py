"""
Application services package.
"""

from .cost_overrun import CostOverrunPolicy, CostVariance
from .domain_events import drain_domain_events
from .transaction_scope import transaction_scope

__all__ = [
    "CostOverrunPolicy",
    "CostVariance",
    "drain_domain_events",
    "transaction_scope",
]
