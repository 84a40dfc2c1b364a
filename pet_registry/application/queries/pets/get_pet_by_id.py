"""Get Pet By Id Query."""

import logging
from dataclasses import dataclass

from pet_registry.application.common.interfaces import Query, QueryHandler
from pet_registry.domain.entities.pet import Pet
from pet_registry.domain.exceptions import PetNotFoundError, UnauthorizedError
from pet_registry.domain.ports import PetPersistenceGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetPetByIdQuery(Query[Pet]):
    pet_id: str
    user_id: str


class GetPetByIdHandler(QueryHandler[Pet]):
    def __init__(self, pet_gateway: PetPersistenceGateway):
        self._pet_gateway = pet_gateway

    async def execute(self, query: GetPetByIdQuery) -> Pet:
        """
        Raises:
            PetNotFoundError: If the pet doesn't exist or was soft-deleted,
                checked before ownership so deleted pets never reveal an owner
            UnauthorizedError: If the user doesn't own the pet
        """
        logger.info(f"[{query.user_id}] Fetching pet details for {query.pet_id}")

        pet = await self._pet_gateway.find_by_id(query.pet_id)
        if pet is None or pet.is_deleted:
            logger.warning(f"[{query.user_id}] Pet not found or deleted: {query.pet_id}")
            raise PetNotFoundError(query.pet_id)

        if not pet.is_owned_by(query.user_id):
            logger.warning(
                f"[{query.user_id}] Unauthorized attempt to view pet {query.pet_id}"
            )
            raise UnauthorizedError("Not authorized to view this pet")

        return pet
