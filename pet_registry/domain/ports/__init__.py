"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- pet_persistence_gateway.py → pet records (Prisma/PostgreSQL, in-memory)
- photo_storage_gateway.py   → avatar objects (S3)
"""

from pet_registry.domain.ports.pet_persistence_gateway import PetPersistenceGateway
from pet_registry.domain.ports.photo_storage_gateway import PhotoStorageGateway

__all__ = [
    "PetPersistenceGateway",
    "PhotoStorageGateway",
]
