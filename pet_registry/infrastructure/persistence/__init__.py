"""
Persistence Layer - Database implementations.

PrismaPetPersistenceGateway is imported from its module directly: the Prisma
client only exists after `prisma generate`, so it is loaded on demand.
"""

from pet_registry.infrastructure.persistence.in_memory_pet_repository import (
    InMemoryPetPersistenceGateway,
)

__all__ = [
    "InMemoryPetPersistenceGateway",
]
