"""
DomainValidationError - Raised when input is malformed or out of range.
Maps to: HTTP 400 Bad Request
"""

from pet_registry.domain.exceptions.domain_error import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""
