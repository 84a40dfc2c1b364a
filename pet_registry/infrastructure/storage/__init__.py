from pet_registry.infrastructure.storage.s3_client import create_s3_client
from pet_registry.infrastructure.storage.s3_photo_storage import S3PhotoStorageGateway

__all__ = [
    "create_s3_client",
    "S3PhotoStorageGateway",
]
