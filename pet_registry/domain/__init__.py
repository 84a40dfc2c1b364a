"""
DOMAIN LAYER - Pets, their rules and the ports the rest of the system implements

This layer contains:
- Entities: Pet, PresignedUploadUrl
- Ports: PetPersistenceGateway, PhotoStorageGateway
- Services: Pure domain logic (avatar key layout)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, boto3, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
