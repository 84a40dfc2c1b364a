"""
DTOs - Data Transfer Objects

- pet.py → PetDTO, PetListItemDTO, PresignedUrlDTO, ErrorDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from pet_registry.application.dto.pet import (
    ErrorDTO,
    PetDTO,
    PetListDTO,
    PetListItemDTO,
    PresignedUrlDTO,
)

__all__ = [
    "ErrorDTO",
    "PetDTO",
    "PetListDTO",
    "PetListItemDTO",
    "PresignedUrlDTO",
]
