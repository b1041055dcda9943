"""List properties use case."""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from src.application.interfaces.repositories import PropertyRepositoryInterface
from src.config.logging import get_logger
from src.domain.value_objects.property_type import PropertyType

logger = get_logger(__name__)


@dataclass
class ListPropertiesRequest:
    """Request for listing properties, optionally of one type."""

    property_type: Optional[PropertyType] = None


@dataclass
class PropertySummary:
    """Property row for pickers and overviews."""

    property_id: UUID
    name: str
    address: str
    property_type: PropertyType
    unit_count: int


class ListPropertiesUseCase:
    """Read-only use case listing properties ordered by name."""

    def __init__(self, property_repo: PropertyRepositoryInterface):
        self.property_repo = property_repo

    async def execute(
        self, request: Optional[ListPropertiesRequest] = None
    ) -> List[PropertySummary]:
        request = request or ListPropertiesRequest()

        properties = await self.property_repo.list_all()
        if request.property_type is not None:
            properties = [
                p for p in properties if p.property_type == request.property_type
            ]

        summaries = [
            PropertySummary(
                property_id=p.id,
                name=p.name,
                address=p.address.full_address,
                property_type=p.property_type,
                unit_count=len(p.units),
            )
            for p in sorted(properties, key=lambda p: p.name.lower())
        ]

        logger.debug("Properties listed", count=len(summaries))
        return summaries
