"""Pet queries."""

from pet_registry.application.queries.pets.get_pet_by_id import (
    GetPetByIdQuery,
    GetPetByIdHandler,
)
from pet_registry.application.queries.pets.list_pets import (
    ListPetsQuery,
    ListPetsHandler,
)

__all__ = [
    "GetPetByIdQuery",
    "GetPetByIdHandler",
    "ListPetsQuery",
    "ListPetsHandler",
]
