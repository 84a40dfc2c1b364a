"""
Pet Persistence Port - Interface for pet record storage.
Implementations: pet_registry/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional
from pet_registry.domain.entities.pet import Pet


class PetPersistenceGateway(ABC):
    @abstractmethod
    async def save(self, pet: Pet) -> Pet:
        """Insert a new pet and return it with its assigned id."""
        ...

    @abstractmethod
    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        """Return the pet, soft-deleted ones included, or None."""
        ...

    @abstractmethod
    async def update(self, pet: Pet) -> Pet: ...

    @abstractmethod
    async def soft_delete(self, pet_id: str) -> None:
        """Stamp deleted_at. The row itself is kept."""
        ...

    @abstractmethod
    def find_all_by_owner(self, user_id: str) -> AsyncIterator[Pet]:
        """Stream the owner's non-deleted pets in storage order."""
        ...

    @abstractmethod
    async def count_by_owner(self, user_id: str) -> int:
        """Number of non-deleted pets owned by user_id."""
        ...
