"""Tests for GetPetById and ListPets."""

from datetime import datetime, timezone

import pytest

from pet_registry.application.queries.pets import (
    GetPetByIdHandler,
    GetPetByIdQuery,
    ListPetsHandler,
    ListPetsQuery,
)
from pet_registry.domain.exceptions import PetNotFoundError, UnauthorizedError


def _stream(*items, error=None):
    """Stand-in for find_all_by_owner: yields items, then optionally fails."""

    async def _gen(user_id):
        for item in items:
            yield item
        if error is not None:
            raise error

    return _gen


async def _drain(handler, query):
    return [pet async for pet in handler.execute(query)]


class TestGetPetByIdHandler:
    @pytest.mark.asyncio
    async def test_returns_owned_pet(self, pet_gateway, make_pet):
        pet = make_pet()
        pet_gateway.find_by_id.return_value = pet
        handler = GetPetByIdHandler(pet_gateway)

        result = await handler.execute(GetPetByIdQuery(pet_id="pet-123", user_id="user-123"))

        assert result is pet
        pet_gateway.find_by_id.assert_awaited_once_with("pet-123")

    @pytest.mark.asyncio
    async def test_unknown_pet_raises_not_found(self, pet_gateway):
        pet_gateway.find_by_id.return_value = None
        handler = GetPetByIdHandler(pet_gateway)

        with pytest.raises(PetNotFoundError) as exc_info:
            await handler.execute(GetPetByIdQuery(pet_id="pet-999", user_id="user-123"))

        assert str(exc_info.value) == "Pet with id pet-999 not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", ["user-123", "user-456"])
    async def test_deleted_pet_is_not_found_for_everyone(self, pet_gateway, make_pet, caller):
        pet_gateway.find_by_id.return_value = make_pet(
            deleted_at=datetime(2024, 3, 1, tzinfo=timezone.utc)
        )
        handler = GetPetByIdHandler(pet_gateway)

        with pytest.raises(PetNotFoundError):
            await handler.execute(GetPetByIdQuery(pet_id="pet-123", user_id=caller))

    @pytest.mark.asyncio
    async def test_other_owner_raises_unauthorized(self, pet_gateway, make_pet):
        pet_gateway.find_by_id.return_value = make_pet(owner="user-123")
        handler = GetPetByIdHandler(pet_gateway)

        with pytest.raises(UnauthorizedError) as exc_info:
            await handler.execute(GetPetByIdQuery(pet_id="pet-123", user_id="user-456"))

        assert str(exc_info.value) == "Not authorized to view this pet"


class TestListPetsHandler:
    @pytest.mark.asyncio
    async def test_yields_gateway_pets_in_order(self, pet_gateway, make_pet):
        first = make_pet(id="pet-1", name="Buddy")
        second = make_pet(id="pet-2", name="Misu")
        pet_gateway.find_all_by_owner.side_effect = _stream(first, second)
        handler = ListPetsHandler(pet_gateway)

        pets = await _drain(handler, ListPetsQuery(user_id="user-123"))

        assert pets == [first, second]
        pet_gateway.find_all_by_owner.assert_called_once_with("user-123")

    @pytest.mark.asyncio
    async def test_user_without_pets_gets_empty_stream(self, pet_gateway):
        pet_gateway.find_all_by_owner.side_effect = _stream()
        handler = ListPetsHandler(pet_gateway)

        pets = await _drain(handler, ListPetsQuery(user_id="user-no-pets"))

        assert pets == []

    @pytest.mark.asyncio
    async def test_nothing_is_fetched_until_consumed(self, pet_gateway):
        pet_gateway.find_all_by_owner.side_effect = _stream()
        handler = ListPetsHandler(pet_gateway)

        handler.execute(ListPetsQuery(user_id="user-123"))

        pet_gateway.find_all_by_owner.assert_not_called()

    @pytest.mark.asyncio
    async def test_mid_stream_failure_follows_yielded_pets(self, pet_gateway, make_pet):
        first = make_pet(id="pet-1")
        failure = ConnectionError("connection lost")
        pet_gateway.find_all_by_owner.side_effect = _stream(first, error=failure)
        handler = ListPetsHandler(pet_gateway)

        received = []
        with pytest.raises(ConnectionError) as exc_info:
            async for pet in handler.execute(ListPetsQuery(user_id="user-123")):
                received.append(pet)

        assert received == [first]
        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_lists_only_active_pets_from_memory_gateway(self, memory_gateway, make_pet):
        await memory_gateway.save(make_pet(id="pet-1", owner="user-123"))
        await memory_gateway.save(make_pet(id="pet-2", owner="user-123"))
        await memory_gateway.save(make_pet(id="pet-3", owner="user-456"))
        await memory_gateway.soft_delete("pet-2")
        handler = ListPetsHandler(memory_gateway)

        pets = await _drain(handler, ListPetsQuery(user_id="user-123"))

        assert [pet.id for pet in pets] == ["pet-1"]
