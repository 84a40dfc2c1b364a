"""
Request models for the pets API.

Each request turns itself into a command with to_command(), returning
Valid(command) or Invalid(error) for the first field rule that fails.
Type coercion (ints, dates, decimals) is left to Pydantic.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from pet_registry.application.commands.pets import (
    ConfirmAvatarUploadCommand,
    GeneratePresignedUrlCommand,
    RegisterPetCommand,
    UpdatePetCommand,
)
from pet_registry.application.common.validated import Invalid, Valid, Validated
from pet_registry.domain.entities.pet import Species
from pet_registry.domain.entities.photo_upload import PhotoUpload


def _is_blank(value: Optional[str]) -> bool:
    return value is not None and not value.strip()


def _pet_field_error(
    name: str,
    species: str,
    breed: Optional[str],
    nickname: Optional[str],
    age: int,
    weight: Optional[Decimal],
) -> Optional[str]:
    if _is_blank(name):
        return "Pet name cannot be blank"
    if _is_blank(species):
        return "Pet species cannot be blank"
    if _is_blank(breed):
        return "Pet breed cannot be blank"
    if _is_blank(nickname):
        return "Pet nickname cannot be blank"
    if age < 0:
        return "Pet age must be zero or greater"
    if weight is not None and weight <= 0:
        return "Pet weight must be greater than zero"
    return None


def _invalid_species(species: str) -> Invalid:
    allowed = ", ".join(s.value for s in Species)
    return Invalid(f"Invalid species: {species}. Must be one of: {allowed}")


class RegisterPetRequest(BaseModel):
    name: str
    species: str
    breed: Optional[str] = None
    age: int
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None

    def to_command(
        self, user_id: str, photo: Optional[PhotoUpload] = None
    ) -> Validated[RegisterPetCommand]:
        error = _pet_field_error(
            self.name, self.species, self.breed, self.nickname, self.age, self.weight
        )
        if error:
            return Invalid(error)
        if self.birthdate is not None and self.birthdate > date.today():
            return Invalid("Pet birthdate cannot be in the future")

        species = Species.parse(self.species)
        if species is None:
            return _invalid_species(self.species)

        return Valid(
            RegisterPetCommand(
                owner=user_id,
                name=self.name,
                species=species,
                breed=self.breed,
                age=self.age,
                birthdate=self.birthdate,
                weight=self.weight,
                nickname=self.nickname,
                photo=photo,
            )
        )


class UpdatePetRequest(BaseModel):
    name: str
    species: str
    breed: Optional[str] = None
    age: int
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None
    photo_url: Optional[str] = None

    def to_command(self, pet_id: str, user_id: str) -> Validated[UpdatePetCommand]:
        if _is_blank(pet_id):
            return Invalid("Pet ID cannot be blank")
        error = _pet_field_error(
            self.name, self.species, self.breed, self.nickname, self.age, self.weight
        )
        if error:
            return Invalid(error)

        species = Species.parse(self.species)
        if species is None:
            return _invalid_species(self.species)

        return Valid(
            UpdatePetCommand(
                pet_id=pet_id,
                user_id=user_id,
                name=self.name,
                species=species,
                breed=self.breed,
                age=self.age,
                birthdate=self.birthdate,
                weight=self.weight,
                nickname=self.nickname,
                photo_url=self.photo_url,
            )
        )


class GeneratePresignedUrlRequest(BaseModel):
    content_type: str

    def to_command(
        self, user_id: str, pet_id: str
    ) -> Validated[GeneratePresignedUrlCommand]:
        if not self.content_type.strip():
            return Invalid("Content type cannot be blank")
        return Valid(GeneratePresignedUrlCommand(user_id, pet_id, self.content_type))


class ConfirmAvatarUploadRequest(BaseModel):
    photo_key: str

    def to_command(
        self, user_id: str, pet_id: str
    ) -> Validated[ConfirmAvatarUploadCommand]:
        if not self.photo_key.strip():
            return Invalid("Photo key cannot be blank")
        return Valid(ConfirmAvatarUploadCommand(user_id, pet_id, self.photo_key))
