"""
Pet Entity - A pet registered by its owner.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Species(str, Enum):
    DOG = "DOG"
    CAT = "CAT"

    @classmethod
    def parse(cls, value: str) -> Optional[Species]:
        """Case-insensitive lookup, None when the name is unknown."""
        for species in cls:
            if species.name.lower() == value.lower():
                return species
        return None


@dataclass(frozen=True)
class Pet:
    """
    id is assigned by persistence on creation. owner, id and
    registration_date never change once the pet is saved.
    """

    name: str
    species: Species
    breed: Optional[str]
    age: int
    owner: str
    registration_date: date
    id: Optional[str] = None
    birthdate: Optional[date] = None
    weight: Optional[Decimal] = None
    nickname: Optional[str] = None
    photo_url: Optional[str] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        owner: str,
        name: str,
        species: Species,
        breed: Optional[str],
        age: int,
        birthdate: Optional[date] = None,
        weight: Optional[Decimal] = None,
        nickname: Optional[str] = None,
    ) -> Pet:
        """Factory for a brand new, not yet persisted pet registered today."""
        return cls(
            name=name,
            species=species,
            breed=breed,
            age=age,
            birthdate=birthdate,
            weight=weight,
            nickname=nickname,
            owner=owner,
            registration_date=date.today(),
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner == user_id

    def with_photo_url(self, photo_url: str) -> Pet:
        return replace(self, photo_url=photo_url)
