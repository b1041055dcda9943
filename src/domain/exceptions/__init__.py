"""
Domain exceptions package.
"""

from .base import DomainError
from .not_found_error import EntityNotFoundError
from .state_error import InvalidStateError, PreconditionError
from .validation_error import InvalidArgumentError, RequiredFieldError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "InvalidStateError",
    "PreconditionError",
    "RequiredFieldError",
]
