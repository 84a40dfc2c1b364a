"""
Photo Storage Port - Interface for avatar objects in an object store.
Implementation: pet_registry/infrastructure/storage/s3_photo_storage.py
"""

from abc import ABC, abstractmethod
from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl


class PhotoStorageGateway(ABC):
    @abstractmethod
    async def upload_photo(
        self,
        user_id: str,
        pet_id: str,
        file_name: str,
        content_type: str,
        data: bytes,
    ) -> str:
        """Store the photo under the pet's prefix and return its public URL."""
        ...

    @abstractmethod
    async def generate_presigned_url(
        self,
        user_id: str,
        pet_id: str,
        content_type: str,
        expiration_minutes: int,
    ) -> PresignedUploadUrl: ...

    @abstractmethod
    async def verify_photo_exists(self, key: str) -> bool: ...

    @abstractmethod
    def build_photo_url(self, key: str) -> str: ...
