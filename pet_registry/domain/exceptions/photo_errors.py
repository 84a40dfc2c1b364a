"""
Photo errors - Failures around avatar photos in object storage.

PhotoNotFoundError      → HTTP 404 (confirmed key is not in the bucket)
PhotoSizeExceededError  → HTTP 413
PhotoUploadError        → HTTP 502 (storage refused or failed the operation)
"""

from typing import Optional

from pet_registry.domain.exceptions.domain_error import DomainError


class PhotoNotFoundError(DomainError):
    def __init__(self, photo_key: str):
        super().__init__(f"Photo not found in storage: {photo_key}")
        self.photo_key = photo_key


class PhotoSizeExceededError(DomainError):
    def __init__(self, actual_size: int, max_size: int):
        super().__init__(
            f"Photo size {actual_size} bytes exceeds maximum allowed size "
            f"of {max_size} bytes"
        )
        self.actual_size = actual_size
        self.max_size = max_size


class PhotoUploadError(DomainError):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
