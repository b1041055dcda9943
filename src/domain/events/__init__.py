"""
Domain events package.
"""

from typing import Union

from .work_order_assigned import WorkOrderAssigned
from .work_order_created import WorkOrderCreated

DomainEvent = Union[WorkOrderCreated, WorkOrderAssigned]

__all__ = [
    "DomainEvent",
    "WorkOrderAssigned",
    "WorkOrderCreated",
]
