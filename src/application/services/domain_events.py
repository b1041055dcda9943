"""
Draining of domain events recorded on work orders.
"""

from dataclasses import asdict
from typing import List

from src.config.logging import get_logger
from src.domain.entities.work_order import WorkOrder
from src.domain.events import DomainEvent

logger = get_logger(__name__)


def drain_domain_events(work_order: WorkOrder) -> List[DomainEvent]:
    """
    Take the events recorded on a work order after its changes were committed.

    Events are returned in the order they were recorded and logged one by
    one; there is no transport behind this, callers that need to forward
    them do so with the returned list.
    """
    events = work_order.pull_domain_events()
    for event in events:
        logger.info(
            "Domain event recorded",
            event_type=type(event).__name__,
            **{key: str(value) for key, value in asdict(event).items()},
        )
    return events
