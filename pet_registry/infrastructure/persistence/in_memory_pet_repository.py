"""
In-memory Pet Persistence Gateway.

Dict-backed implementation of PetPersistenceGateway, used when
PERSISTENCE_BACKEND=memory (local runs, API tests). Rows are never removed,
soft delete only stamps deleted_at.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import AsyncIterator, Optional
from uuid import uuid4

from pet_registry.domain.entities.pet import Pet
from pet_registry.domain.exceptions import PetNotFoundError
from pet_registry.domain.ports import PetPersistenceGateway

logger = logging.getLogger(__name__)


class InMemoryPetPersistenceGateway(PetPersistenceGateway):
    def __init__(self):
        # dicts keep insertion order, which is the listing order
        self._pets: dict[str, Pet] = {}

    async def save(self, pet: Pet) -> Pet:
        saved = pet if pet.id else replace(pet, id=str(uuid4()))
        self._pets[saved.id] = saved
        logger.debug(f"[InMemory] Saved pet {saved.id}")
        return saved

    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        return self._pets.get(pet_id)

    async def update(self, pet: Pet) -> Pet:
        if pet.id not in self._pets:
            raise PetNotFoundError(pet.id)
        self._pets[pet.id] = pet
        return pet

    async def soft_delete(self, pet_id: str) -> None:
        pet = self._pets.get(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)
        self._pets[pet_id] = replace(pet, deleted_at=datetime.now(timezone.utc))

    async def find_all_by_owner(self, user_id: str) -> AsyncIterator[Pet]:
        # snapshot so concurrent writes don't break iteration
        for pet in list(self._pets.values()):
            if pet.owner == user_id and not pet.is_deleted:
                yield pet

    async def count_by_owner(self, user_id: str) -> int:
        return sum(
            1
            for pet in self._pets.values()
            if pet.owner == user_id and not pet.is_deleted
        )
