"""
Prisma Pet Persistence Gateway.

- Implements PetPersistenceGateway port from domain layer
- Uses Prisma client (asyncio interface) over PostgreSQL
- Maps between Prisma models and domain entities
- All methods are async

Mapping:
- Prisma model fields: id, name, species, breed, age, birthdate, weight,
  nickname, owner, registration_date, photo_url, deleted_at
- Date columns (@db.Date) come back as datetimes and are narrowed to date
- species is stored as its enum name
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING, Any, AsyncIterator, Optional

from pet_registry.domain.entities.pet import Pet, Species
from pet_registry.domain.exceptions import PetNotFoundError
from pet_registry.domain.ports import PetPersistenceGateway

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

ACTIVE_ORDER = [{"registration_date": "asc"}, {"id": "asc"}]


def _to_datetime(value: Optional[date]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _to_date(value: Optional[datetime]) -> Optional[date]:
    if value is None:
        return None
    return value.date() if isinstance(value, datetime) else value


class PrismaPetPersistenceGateway(PetPersistenceGateway):
    _prisma: Prisma

    def __init__(self, prisma: Prisma, page_size: int = 50):
        self._prisma = prisma
        self._page_size = page_size

    def _to_entity(self, record: Any) -> Pet:
        """Map Prisma record to domain entity."""
        return Pet(
            id=record.id,
            name=record.name,
            species=Species(record.species),
            breed=record.breed,
            age=record.age,
            birthdate=_to_date(record.birthdate),
            weight=record.weight,
            nickname=record.nickname,
            owner=record.owner,
            registration_date=_to_date(record.registration_date),
            photo_url=record.photo_url,
            deleted_at=record.deleted_at,
        )

    def _editable_fields(self, pet: Pet) -> dict:
        return {
            "name": pet.name,
            "species": pet.species.value,
            "breed": pet.breed,
            "age": pet.age,
            "birthdate": _to_datetime(pet.birthdate),
            "weight": pet.weight,
            "nickname": pet.nickname,
            "photo_url": pet.photo_url,
        }

    async def save(self, pet: Pet) -> Pet:
        """Insert a new pet; the database assigns the id."""
        data = self._editable_fields(pet)
        data["owner"] = pet.owner
        data["registration_date"] = _to_datetime(pet.registration_date)
        if pet.id:
            data["id"] = pet.id

        record = await self._prisma.pet.create(data=data)
        logger.debug(f"[Prisma] Created pet {record.id}")
        return self._to_entity(record)

    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        record = await self._prisma.pet.find_unique(where={"id": pet_id})
        return self._to_entity(record) if record else None

    async def update(self, pet: Pet) -> Pet:
        """Overwrite editable fields. owner and registration_date are never written."""
        record = await self._prisma.pet.update(
            where={"id": pet.id},
            data=self._editable_fields(pet),
        )
        if record is None:
            raise PetNotFoundError(pet.id)
        return self._to_entity(record)

    async def soft_delete(self, pet_id: str) -> None:
        record = await self._prisma.pet.update(
            where={"id": pet_id},
            data={"deleted_at": datetime.now(timezone.utc)},
        )
        if record is None:
            raise PetNotFoundError(pet_id)
        logger.debug(f"[Prisma] Soft-deleted pet {pet_id}")

    async def find_all_by_owner(self, user_id: str) -> AsyncIterator[Pet]:
        """Yield active pets page by page, oldest registration first."""
        skip = 0
        while True:
            records = await self._prisma.pet.find_many(
                where={"owner": user_id, "deleted_at": None},
                order=ACTIVE_ORDER,
                skip=skip,
                take=self._page_size,
            )
            for record in records:
                yield self._to_entity(record)
            if len(records) < self._page_size:
                return
            skip += len(records)

    async def count_by_owner(self, user_id: str) -> int:
        return await self._prisma.pet.count(
            where={"owner": user_id, "deleted_at": None}
        )
