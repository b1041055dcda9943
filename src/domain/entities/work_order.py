"""
Work order aggregate enforcing the maintenance lifecycle state machine.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from src.domain.events import DomainEvent, WorkOrderAssigned, WorkOrderCreated
from src.domain.exceptions.state_error import InvalidStateError, PreconditionError
from src.domain.exceptions.validation_error import (
    InvalidArgumentError,
    RequiredFieldError,
)
from src.domain.shared.guards import is_blank, is_missing_id, is_naive
from src.domain.value_objects.money import Money
from src.domain.value_objects.work_order_priority import WorkOrderPriority
from src.domain.value_objects.work_order_status import WorkOrderStatus


@dataclass
class WorkOrder:
    """Work order aggregate root."""

    property_id: UUID
    description: str
    priority: WorkOrderPriority
    unit_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    status: WorkOrderStatus = WorkOrderStatus.NEW
    assigned_vendor_id: Optional[UUID] = None
    assigned_technician_id: Optional[UUID] = None
    estimated_cost: Money = field(default_factory=Money.zero)
    actual_cost: Optional[Money] = None
    created_at: Optional[datetime] = None
    assigned_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    scheduled_for: Optional[datetime] = None
    completion_notes: Optional[str] = None
    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self):
        """Validate work order data."""
        if is_missing_id(self.property_id):
            raise InvalidArgumentError("Property ID cannot be empty")
        if is_blank(self.description):
            raise InvalidArgumentError("Description cannot be empty")
        if self.priority is None:
            raise RequiredFieldError("priority")
        if self.scheduled_for is not None and is_naive(self.scheduled_for):
            raise InvalidArgumentError("Scheduled time must be timezone-aware")

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @classmethod
    def create(
        cls,
        property_id: UUID,
        unit_id: Optional[UUID],
        description: str,
        priority: WorkOrderPriority,
    ) -> "WorkOrder":
        """Open a new work order and record its creation event."""
        work_order = cls(
            property_id=property_id,
            unit_id=unit_id,
            description=description,
            priority=priority,
        )
        work_order._record(
            WorkOrderCreated(
                work_order_id=work_order.id,
                property_id=work_order.property_id,
                unit_id=work_order.unit_id,
                description=work_order.description,
                priority=work_order.priority,
                created_at=work_order.created_at,
            )
        )
        return work_order

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Events recorded since the last drain, oldest first."""
        return tuple(self._domain_events)

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return recorded events and clear the buffer."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    @property
    def is_assigned(self) -> bool:
        return self.assigned_vendor_id is not None

    def assign_to_vendor(
        self,
        vendor_id: UUID,
        technician_id: Optional[UUID] = None,
        scheduled_for: Optional[datetime] = None,
    ) -> WorkOrderAssigned:
        """Assign the work order to a vendor and optionally a technician."""
        self._ensure_can_transition(WorkOrderStatus.ASSIGNED, "assign work order")

        if is_missing_id(vendor_id):
            raise InvalidArgumentError("Vendor ID cannot be empty")
        if scheduled_for is not None and is_naive(scheduled_for):
            raise InvalidArgumentError("Scheduled time must be timezone-aware")

        self.assigned_vendor_id = vendor_id
        self.assigned_technician_id = technician_id
        self.assigned_at = datetime.now(timezone.utc)
        self.scheduled_for = scheduled_for
        self.status = WorkOrderStatus.ASSIGNED

        event = WorkOrderAssigned(
            work_order_id=self.id,
            vendor_id=vendor_id,
            technician_id=technician_id,
            assigned_at=self.assigned_at,
        )
        self._record(event)
        return event

    def unassign(self) -> None:
        """Release the assigned vendor and return the work order to New."""
        self._ensure_can_transition(WorkOrderStatus.NEW, "unassign work order")

        self.assigned_vendor_id = None
        self.assigned_technician_id = None
        self.assigned_at = None
        self.scheduled_for = None
        self.status = WorkOrderStatus.NEW

    def start_work(self) -> None:
        """Mark work as started by the assigned vendor."""
        self._ensure_can_transition(WorkOrderStatus.IN_PROGRESS, "start work order")

        if not self.is_assigned:
            raise PreconditionError(
                "Cannot start work order without vendor assignment"
            )

        self.status = WorkOrderStatus.IN_PROGRESS

    def complete(self, actual_cost: Money, completion_notes: Optional[str]) -> None:
        """Mark work order as completed and record what it cost."""
        self._ensure_can_transition(WorkOrderStatus.COMPLETED, "complete work order")

        if not self.is_assigned:
            raise PreconditionError(
                "Cannot complete work order without vendor assignment"
            )
        if actual_cost is None:
            raise RequiredFieldError("actual_cost")

        self.actual_cost = actual_cost
        self.completion_notes = completion_notes
        self.completed_at = datetime.now(timezone.utc)
        self.status = WorkOrderStatus.COMPLETED

    def cancel(self) -> None:
        """Cancel the work order."""
        self._ensure_can_transition(WorkOrderStatus.CANCELLED, "cancel work order")

        self.status = WorkOrderStatus.CANCELLED

    def update_estimated_cost(self, estimated_cost: Money) -> None:
        if self.status.is_final():
            raise InvalidStateError(
                str(self.status),
                "update estimated cost",
                "Cannot update estimated cost of completed or cancelled work order",
            )
        if estimated_cost is None:
            raise RequiredFieldError("estimated_cost")

        self.estimated_cost = estimated_cost

    def update_priority(self, priority: WorkOrderPriority) -> None:
        if self.status.is_final():
            raise InvalidStateError(
                str(self.status),
                "update priority",
                "Cannot update priority of completed or cancelled work order",
            )
        if priority is None:
            raise RequiredFieldError("priority")

        self.priority = priority

    def requires_immediate_attention(self) -> bool:
        """Check if the work order must be handled ahead of normal scheduling."""
        return self.priority.is_emergency()

    def to_dict(self) -> dict:
        """Convert work order to dictionary."""
        return {
            "id": str(self.id),
            "property_id": str(self.property_id),
            "unit_id": str(self.unit_id) if self.unit_id else None,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.display_name,
            "assigned_vendor_id": (
                str(self.assigned_vendor_id) if self.assigned_vendor_id else None
            ),
            "assigned_technician_id": (
                str(self.assigned_technician_id)
                if self.assigned_technician_id
                else None
            ),
            "estimated_cost": self.estimated_cost.to_dict(),
            "actual_cost": self.actual_cost.to_dict() if self.actual_cost else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "assigned_at": self.assigned_at.isoformat() if self.assigned_at else None,
            "completed_at": (
                self.completed_at.isoformat() if self.completed_at else None
            ),
            "scheduled_for": (
                self.scheduled_for.isoformat() if self.scheduled_for else None
            ),
            "completion_notes": self.completion_notes,
        }

    def _ensure_can_transition(self, target: WorkOrderStatus, action: str) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidStateError(str(self.status), action)

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
