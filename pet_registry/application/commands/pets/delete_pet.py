"""Delete Pet Command (soft delete)."""

import logging
from dataclasses import dataclass

from pet_registry.application.common.interfaces import Command, CommandHandler
from pet_registry.domain.exceptions import PetNotFoundError
from pet_registry.domain.ports import PetPersistenceGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletePetCommand(Command[None]):
    pet_id: str
    user_id: str


class DeletePetHandler(CommandHandler[None]):
    def __init__(self, pet_gateway: PetPersistenceGateway):
        self._pet_gateway = pet_gateway

    async def execute(self, command: DeletePetCommand) -> None:
        """
        Soft-delete a pet.

        Raises:
            PetNotFoundError: If the pet doesn't exist or belongs to someone
                else. Ownership is not revealed on delete.

        Deleting an already deleted pet is a no-op.
        """
        logger.info(
            f"[{command.pet_id}] Starting pet soft-delete for user: {command.user_id}"
        )

        pet = await self._pet_gateway.find_by_id(command.pet_id)
        if pet is None:
            logger.warning(f"[{command.pet_id}] Pet not found for deletion")
            raise PetNotFoundError(command.pet_id)

        if not pet.is_owned_by(command.user_id):
            logger.warning(
                f"[{command.pet_id}] Unauthorized delete attempt by user: {command.user_id}"
            )
            raise PetNotFoundError(command.pet_id)

        if pet.is_deleted:
            logger.info(f"[{command.pet_id}] Pet already soft-deleted")
            return

        await self._pet_gateway.soft_delete(command.pet_id)
        logger.info(f"[{command.pet_id}] Pet soft-delete completed")
