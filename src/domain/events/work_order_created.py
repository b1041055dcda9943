"""
Work order created domain event.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.value_objects.work_order_priority import WorkOrderPriority


@dataclass(frozen=True)
class WorkOrderCreated:
    """Event raised when a work order is created."""

    work_order_id: UUID
    property_id: UUID
    unit_id: Optional[UUID]
    description: str
    priority: WorkOrderPriority
    created_at: datetime
