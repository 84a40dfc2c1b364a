"""
Register Pet Command.

The owner is taken as given: the presentation layer has already resolved the
caller's identity and validated the request fields.

Flow:
  check photo size → check pet limit → save pet → upload photo (optional)
  → store photo URL on the pet

A photo that fails to upload leaves the pet saved without a photo_url.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pet_registry.application.common.interfaces import Command, CommandHandler
from pet_registry.domain.entities.pet import Pet, Species
from pet_registry.domain.entities.photo_upload import PhotoUpload
from pet_registry.domain.exceptions import PetLimitExceededError, PhotoSizeExceededError
from pet_registry.domain.ports import PetPersistenceGateway, PhotoStorageGateway

logger = logging.getLogger(__name__)

MAX_PHOTO_SIZE_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class RegisterPetCommand(Command[Pet]):
    owner: str
    name: str
    species: Species
    breed: Optional[str]
    age: int
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None
    photo: Optional[PhotoUpload] = None


class RegisterPetHandler(CommandHandler[Pet]):
    def __init__(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
        max_pets_per_user: Optional[int] = None,
    ):
        self._pet_gateway = pet_gateway
        self._photo_storage = photo_storage
        self._max_pets_per_user = max_pets_per_user

    async def execute(self, command: RegisterPetCommand) -> Pet:
        logger.info(
            f"[{command.owner}] Starting pet registration for pet: {command.name}"
        )

        if command.photo is not None and command.photo.size > MAX_PHOTO_SIZE_BYTES:
            raise PhotoSizeExceededError(command.photo.size, MAX_PHOTO_SIZE_BYTES)

        if self._max_pets_per_user:
            await self._check_pet_limit(command.owner)

        pet = Pet.register(
            owner=command.owner,
            name=command.name,
            species=command.species,
            breed=command.breed,
            age=command.age,
            birthdate=command.birthdate,
            weight=command.weight,
            nickname=command.nickname,
        )
        saved = await self._pet_gateway.save(pet)

        if command.photo is not None:
            saved = await self._attach_photo(saved, command.photo)

        logger.info(f"[{saved.id}] Pet registration completed")
        return saved

    async def _check_pet_limit(self, owner: str) -> None:
        count = await self._pet_gateway.count_by_owner(owner)
        if count >= self._max_pets_per_user:
            logger.warning(f"[{owner}] Pet limit exceeded: {count} pets registered")
            raise PetLimitExceededError(owner, self._max_pets_per_user)

    async def _attach_photo(self, pet: Pet, photo: PhotoUpload) -> Pet:
        logger.info(f"[{pet.id}] Uploading photo: {photo.file_name}")
        photo_url = await self._photo_storage.upload_photo(
            pet.owner, pet.id, photo.file_name, photo.content_type, photo.data
        )
        return await self._pet_gateway.update(pet.with_photo_url(photo_url))
