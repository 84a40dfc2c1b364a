import os
import time
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock

import jwt
import pytest

os.environ.setdefault("PERSISTENCE_BACKEND", "memory")

from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from pet_registry.domain.entities.pet import Pet, Species
from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl
from pet_registry.domain.ports import PetPersistenceGateway, PhotoStorageGateway
from pet_registry.domain.services.avatar_keys import build_avatar_key, uploaded_photo_key
from pet_registry.fastapi_app import create_fastapi_app
from pet_registry.infrastructure.persistence import InMemoryPetPersistenceGateway
from pet_registry.setup.ioc import create_container


def user_token(user_id="user-123", **extra_claims):
    """Bearer token carrying user_id. This service never checks the signature."""
    now = int(time.time())
    claims = {"user_id": user_id, "iat": now, "exp": now + 300, **extra_claims}
    return jwt.encode(claims, "signing-key-checked-upstream-not-here", algorithm="HS256")


class FakePhotoStorage(PhotoStorageGateway):
    """Records issued keys and answers existence checks from a set."""

    def __init__(self):
        self.existing_keys: set[str] = set()
        self.uploads: dict[str, bytes] = {}

    async def upload_photo(self, user_id, pet_id, file_name, content_type, data):
        key = uploaded_photo_key(user_id, pet_id, file_name)
        self.uploads[key] = data
        self.existing_keys.add(key)
        return self.build_photo_url(key)

    async def generate_presigned_url(self, user_id, pet_id, content_type, expiration_minutes):
        key = build_avatar_key(user_id, pet_id, content_type)
        return PresignedUploadUrl(
            upload_url=f"https://uploads.example.com/{key}?signature=abc",
            key=key,
            expires_at=datetime.now(timezone.utc) + timedelta(minutes=expiration_minutes),
        )

    async def verify_photo_exists(self, key):
        return key in self.existing_keys

    def build_photo_url(self, key):
        return f"https://cdn.example.com/{key}"


class FakeGatewayProvider(Provider):
    def __init__(self, pet_gateway, photo_storage):
        super().__init__()
        self._pet_gateway = pet_gateway
        self._photo_storage = photo_storage

    @provide(scope=Scope.APP)
    def get_pet_gateway(self) -> PetPersistenceGateway:
        return self._pet_gateway

    @provide(scope=Scope.APP)
    def get_photo_storage(self) -> PhotoStorageGateway:
        return self._photo_storage


@pytest.fixture()
def make_pet():
    def _make_pet(**overrides) -> Pet:
        pet = Pet(
            id="pet-123",
            name="Buddy",
            species=Species.DOG,
            breed="Golden Retriever",
            age=3,
            owner="user-123",
            registration_date=date(2024, 1, 15),
        )
        return replace(pet, **overrides)

    return _make_pet


@pytest.fixture()
def pet_gateway():
    return AsyncMock(spec=PetPersistenceGateway)


@pytest.fixture()
def photo_storage():
    return AsyncMock(spec=PhotoStorageGateway)


@pytest.fixture()
def memory_gateway():
    return InMemoryPetPersistenceGateway()


@pytest.fixture()
def fake_storage():
    return FakePhotoStorage()


@pytest.fixture()
def app(memory_gateway, fake_storage):
    """FastAPI app wired to in-memory gateways."""
    container = create_container(FakeGatewayProvider(memory_gateway, fake_storage))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    return {"Authorization": f"Bearer {user_token()}"}


@pytest.fixture()
def other_user_headers():
    return {"Authorization": f"Bearer {user_token('user-456')}"}


@pytest.fixture()
def token_factory():
    return user_token
