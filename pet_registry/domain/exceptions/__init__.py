"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from pet_registry.domain.exceptions.domain_error import DomainError
from pet_registry.domain.exceptions.validation_error import DomainValidationError
from pet_registry.domain.exceptions.unauthorized import UnauthorizedError
from pet_registry.domain.exceptions.pet_not_found import PetNotFoundError
from pet_registry.domain.exceptions.pet_limit_exceeded import PetLimitExceededError
from pet_registry.domain.exceptions.photo_errors import (
    PhotoNotFoundError,
    PhotoSizeExceededError,
    PhotoUploadError,
)

__all__ = [
    "DomainError",
    "DomainValidationError",
    "UnauthorizedError",
    "PetNotFoundError",
    "PetLimitExceededError",
    "PhotoNotFoundError",
    "PhotoSizeExceededError",
    "PhotoUploadError",
]
