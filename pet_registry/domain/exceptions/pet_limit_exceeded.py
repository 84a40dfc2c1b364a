"""
PetLimitExceededError - Raised when an owner already has the maximum number of pets.
Maps to: HTTP 409 Conflict
"""

from pet_registry.domain.exceptions.domain_error import DomainError


class PetLimitExceededError(DomainError):
    def __init__(self, user_id: str, limit: int):
        super().__init__(
            f"User {user_id} has reached the maximum limit of {limit} pets"
        )
        self.user_id = user_id
        self.limit = limit
