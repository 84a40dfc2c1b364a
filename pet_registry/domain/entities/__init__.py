"""
ENTITIES - Business objects

Pure Python dataclasses (no ORM, no Pydantic).
"""

from pet_registry.domain.entities.pet import Pet, Species
from pet_registry.domain.entities.photo_upload import PhotoUpload
from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl

__all__ = [
    "Pet",
    "Species",
    "PhotoUpload",
    "PresignedUploadUrl",
]
