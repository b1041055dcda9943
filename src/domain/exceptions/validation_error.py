"""
Validation-related domain exceptions.
"""

from .base import DomainError


class InvalidArgumentError(DomainError):
    """Raised when input to a factory or operation is malformed or missing."""

    pass


class RequiredFieldError(InvalidArgumentError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")
