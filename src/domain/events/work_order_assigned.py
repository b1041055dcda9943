"""
Work order assigned domain event.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class WorkOrderAssigned:
    """Event raised when a work order is assigned to a vendor or technician."""

    work_order_id: UUID
    vendor_id: UUID
    technician_id: Optional[UUID]
    assigned_at: datetime
