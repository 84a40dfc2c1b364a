"""Pet DTOs for API responses."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from pet_registry.domain.entities.pet import Pet
from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl


class PetDTO(BaseModel):
    id: str
    name: str
    species: str
    breed: Optional[str] = None
    age: int
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None
    owner: str
    registration_date: date
    photo_url: Optional[str] = None

    @classmethod
    def from_entity(cls, pet: Pet) -> PetDTO:
        return cls(
            id=pet.id,
            name=pet.name,
            species=pet.species.value,
            breed=pet.breed,
            age=pet.age,
            birthdate=pet.birthdate,
            weight=pet.weight,
            nickname=pet.nickname,
            owner=pet.owner,
            registration_date=pet.registration_date,
            photo_url=pet.photo_url,
        )


class PetListItemDTO(BaseModel):
    id: str
    name: str
    species: str
    breed: Optional[str] = None
    photo_url: Optional[str] = None

    @classmethod
    def from_entity(cls, pet: Pet) -> PetListItemDTO:
        return cls(
            id=pet.id,
            name=pet.name,
            species=pet.species.value,
            breed=pet.breed,
            photo_url=pet.photo_url,
        )


class PetListDTO(BaseModel):
    pets: list[PetListItemDTO]
    total: int


class PresignedUrlDTO(BaseModel):
    upload_url: str
    key: str
    expires_at: datetime

    @classmethod
    def from_entity(cls, presigned: PresignedUploadUrl) -> PresignedUrlDTO:
        return cls(
            upload_url=presigned.upload_url,
            key=presigned.key,
            expires_at=presigned.expires_at,
        )


class ErrorDTO(BaseModel):
    error: str
    message: str
    timestamp: str
