"""
Generate Avatar Presigned URL Command.

Hands the client a short-lived URL to PUT the avatar straight into object
storage. The pet itself is not touched: photo_url only changes when the
upload is confirmed.
"""

import logging
from dataclasses import dataclass

from pet_registry.application.common.interfaces import Command, CommandHandler
from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl
from pet_registry.domain.exceptions import (
    DomainValidationError,
    PetNotFoundError,
    UnauthorizedError,
)
from pet_registry.domain.ports import PetPersistenceGateway, PhotoStorageGateway
from pet_registry.domain.services.avatar_keys import ALLOWED_AVATAR_CONTENT_TYPES

logger = logging.getLogger(__name__)

PRESIGNED_URL_EXPIRATION_MINUTES = 15


@dataclass(frozen=True)
class GeneratePresignedUrlCommand(Command[PresignedUploadUrl]):
    user_id: str
    pet_id: str
    content_type: str


class GenerateAvatarPresignedUrlHandler(CommandHandler[PresignedUploadUrl]):
    def __init__(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
    ):
        self._pet_gateway = pet_gateway
        self._photo_storage = photo_storage

    async def execute(self, command: GeneratePresignedUrlCommand) -> PresignedUploadUrl:
        logger.info(
            f"[{command.user_id}] Generating presigned URL for pet {command.pet_id}"
        )

        if command.content_type not in ALLOWED_AVATAR_CONTENT_TYPES:
            raise DomainValidationError(
                f"Invalid content type: {command.content_type}. "
                f"Must be one of: {', '.join(ALLOWED_AVATAR_CONTENT_TYPES)}"
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

        presigned = await self._photo_storage.generate_presigned_url(
            command.user_id,
            command.pet_id,
            command.content_type,
            PRESIGNED_URL_EXPIRATION_MINUTES,
        )
        logger.info(
            f"[{command.user_id}] Presigned URL generated for pet {command.pet_id}"
        )
        return presigned
