"""
Update Pet Command.

Replaces every editable field of a pet. id, owner and registration_date
always come from the stored record, the command cannot carry them.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pet_registry.application.common.interfaces import Command, CommandHandler
from pet_registry.domain.entities.pet import Pet, Species
from pet_registry.domain.exceptions import (
    DomainValidationError,
    PetNotFoundError,
    UnauthorizedError,
)
from pet_registry.domain.ports import PetPersistenceGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdatePetCommand(Command[Pet]):
    pet_id: str
    user_id: str
    name: str
    species: Species
    breed: Optional[str]
    age: int
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None
    photo_url: Optional[str] = None


def collect_violations(command: UpdatePetCommand) -> list[str]:
    """Every rule is checked, so the caller sees all problems at once."""
    violations = []
    if not command.user_id.strip():
        violations.append("User ID cannot be blank")
    if not command.name.strip():
        violations.append("Pet name cannot be blank")
    if command.age < 0:
        violations.append("Pet age must be zero or greater")
    if command.weight is not None and command.weight <= 0:
        violations.append("Pet weight must be greater than zero")
    if command.birthdate is not None and command.birthdate > date.today():
        violations.append("Pet birthdate cannot be in the future")
    return violations


class UpdatePetHandler(CommandHandler[Pet]):
    def __init__(self, pet_gateway: PetPersistenceGateway):
        self._pet_gateway = pet_gateway

    async def execute(self, command: UpdatePetCommand) -> Pet:
        logger.info(
            f"[{command.pet_id}] Starting pet update for user: {command.user_id}"
        )

        violations = collect_violations(command)
        if violations:
            raise DomainValidationError("; ".join(violations))

        existing = await self._pet_gateway.find_by_id(command.pet_id)
        if existing is None or existing.is_deleted:
            raise PetNotFoundError(command.pet_id)

        if not existing.is_owned_by(command.user_id):
            logger.warning(
                f"[{command.pet_id}] Unauthorized update attempt by user: {command.user_id}"
            )
            raise UnauthorizedError(
                f"User {command.user_id} is not authorized to update pet {command.pet_id}"
            )

        replacement = Pet(
            id=existing.id,
            owner=existing.owner,
            registration_date=existing.registration_date,
            name=command.name,
            species=command.species,
            breed=command.breed,
            age=command.age,
            birthdate=command.birthdate,
            weight=command.weight,
            nickname=command.nickname,
            photo_url=command.photo_url,
            deleted_at=existing.deleted_at,
        )
        updated = await self._pet_gateway.update(replacement)

        logger.info(f"[{updated.id}] Pet update completed")
        return updated
