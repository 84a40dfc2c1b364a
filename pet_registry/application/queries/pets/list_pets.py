"""List Pets Query."""

import logging
from dataclasses import dataclass
from typing import AsyncIterator

from pet_registry.application.common.interfaces import Query, StreamQueryHandler
from pet_registry.domain.entities.pet import Pet
from pet_registry.domain.ports import PetPersistenceGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListPetsQuery(Query[Pet]):
    user_id: str


class ListPetsHandler(StreamQueryHandler[Pet]):
    """
    Streams the user's active pets in the order the gateway yields them.

    The sequence is lazy and single-pass. A gateway failure mid-stream is
    re-raised to the consumer after the pets already yielded.
    """

    def __init__(self, pet_gateway: PetPersistenceGateway):
        self._pet_gateway = pet_gateway

    async def execute(self, query: ListPetsQuery) -> AsyncIterator[Pet]:
        logger.info(f"[{query.user_id}] Listing all active pets")
        count = 0
        try:
            async for pet in self._pet_gateway.find_all_by_owner(query.user_id):
                count += 1
                yield pet
        except Exception as e:
            logger.warning(
                f"[{query.user_id}] Failed to list active pets after {count}: {e}"
            )
            raise
        logger.info(f"[{query.user_id}] Completed listing {count} active pets")
