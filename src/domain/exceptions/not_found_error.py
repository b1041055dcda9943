"""
Lookup-related exceptions raised by use cases.
"""

from uuid import UUID

from .base import DomainError


class EntityNotFoundError(DomainError):
    """Raised when an aggregate cannot be loaded by its identifier."""

    def __init__(self, entity_type: str, entity_id: UUID):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} {entity_id} not found")
