"""
UnauthorizedError - Raised when the caller is authenticated but may not act on a pet.
Maps to: HTTP 403 Forbidden
"""

from pet_registry.domain.exceptions.domain_error import DomainError


class UnauthorizedError(DomainError):
    """Raised when user lacks permission to access a pet"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
