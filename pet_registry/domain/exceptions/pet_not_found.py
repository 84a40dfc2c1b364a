"""
PetNotFoundError - Raised when a pet is missing, soft-deleted or hidden from the caller.
Maps to: HTTP 404 Not Found
"""

from pet_registry.domain.exceptions.domain_error import DomainError


class PetNotFoundError(DomainError):
    def __init__(self, pet_id: str):
        super().__init__(f"Pet with id {pet_id} not found")
        self.pet_id = pet_id
