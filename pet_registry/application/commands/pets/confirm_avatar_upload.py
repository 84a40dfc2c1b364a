"""
Confirm Avatar Upload Command.

Flow:
  validate key prefix → load pet → check owner → check object exists
  → store public URL on the pet

Only the last step writes, so a failure anywhere before leaves the pet as it was.
"""

import logging
from dataclasses import dataclass

from pet_registry.application.common.interfaces import Command, CommandHandler
from pet_registry.domain.entities.pet import Pet
from pet_registry.domain.exceptions import (
    DomainValidationError,
    PetNotFoundError,
    PhotoNotFoundError,
    UnauthorizedError,
)
from pet_registry.domain.ports import PetPersistenceGateway, PhotoStorageGateway
from pet_registry.domain.services.avatar_keys import avatar_key_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmAvatarUploadCommand(Command[Pet]):
    user_id: str
    pet_id: str
    photo_key: str


class ConfirmAvatarUploadHandler(CommandHandler[Pet]):
    def __init__(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
    ):
        self._pet_gateway = pet_gateway
        self._photo_storage = photo_storage

    async def execute(self, command: ConfirmAvatarUploadCommand) -> Pet:
        logger.info(
            f"[{command.user_id}] Confirming avatar upload for pet {command.pet_id}"
        )

        expected_prefix = avatar_key_prefix(command.user_id, command.pet_id)
        if not command.photo_key.startswith(expected_prefix):
            raise DomainValidationError(
                f"Invalid photo key: {command.photo_key}. Must start with {expected_prefix}"
            )

        pet = await self._pet_gateway.find_by_id(command.pet_id)
        if pet is None or pet.is_deleted:
            raise PetNotFoundError(command.pet_id)

        if not pet.is_owned_by(command.user_id):
            logger.warning(
                f"[{command.user_id}] Unauthorized access attempt to pet {command.pet_id}"
            )
            raise UnauthorizedError(
                f"User {command.user_id} is not the owner of pet {command.pet_id}"
            )

        if not await self._photo_storage.verify_photo_exists(command.photo_key):
            raise PhotoNotFoundError(command.photo_key)

        photo_url = self._photo_storage.build_photo_url(command.photo_key)
        logger.info(f"[{command.user_id}] Photo verified, updating pet with URL: {photo_url}")

        updated = await self._pet_gateway.update(pet.with_photo_url(photo_url))
        logger.info(
            f"[{command.user_id}] Avatar upload confirmed for pet {command.pet_id}"
        )
        return updated
