"""Tests for InMemoryPetPersistenceGateway."""

from dataclasses import replace

import pytest

from pet_registry.domain.exceptions import PetNotFoundError


@pytest.mark.asyncio
async def test_save_assigns_id_when_missing(memory_gateway, make_pet):
    saved = await memory_gateway.save(make_pet(id=None))

    assert saved.id
    assert await memory_gateway.find_by_id(saved.id) == saved


@pytest.mark.asyncio
async def test_save_assigns_distinct_ids(memory_gateway, make_pet):
    first = await memory_gateway.save(make_pet(id=None))
    second = await memory_gateway.save(make_pet(id=None))

    assert first.id != second.id


@pytest.mark.asyncio
async def test_find_by_id_unknown_returns_none(memory_gateway):
    assert await memory_gateway.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_find_by_id_returns_soft_deleted_pets(memory_gateway, make_pet):
    await memory_gateway.save(make_pet())
    await memory_gateway.soft_delete("pet-123")

    pet = await memory_gateway.find_by_id("pet-123")

    assert pet is not None
    assert pet.is_deleted


@pytest.mark.asyncio
async def test_update_replaces_stored_pet(memory_gateway, make_pet):
    await memory_gateway.save(make_pet())

    updated = await memory_gateway.update(replace(make_pet(), name="Max"))

    assert updated.name == "Max"
    assert (await memory_gateway.find_by_id("pet-123")).name == "Max"


@pytest.mark.asyncio
async def test_update_unknown_pet_raises(memory_gateway, make_pet):
    with pytest.raises(PetNotFoundError):
        await memory_gateway.update(make_pet(id="ghost"))


@pytest.mark.asyncio
async def test_soft_delete_unknown_pet_raises(memory_gateway):
    with pytest.raises(PetNotFoundError):
        await memory_gateway.soft_delete("ghost")


@pytest.mark.asyncio
async def test_listing_and_count_skip_deleted_and_foreign_pets(memory_gateway, make_pet):
    await memory_gateway.save(make_pet(id="pet-1"))
    await memory_gateway.save(make_pet(id="pet-2"))
    await memory_gateway.save(make_pet(id="pet-3"))
    await memory_gateway.save(make_pet(id="pet-4", owner="user-456"))
    await memory_gateway.soft_delete("pet-2")

    listed = [pet.id async for pet in memory_gateway.find_all_by_owner("user-123")]

    assert listed == ["pet-1", "pet-3"]
    assert await memory_gateway.count_by_owner("user-123") == 2
    assert await memory_gateway.count_by_owner("user-456") == 1
    assert await memory_gateway.count_by_owner("nobody") == 0
