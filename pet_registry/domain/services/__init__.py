"""
DOMAIN SERVICES - Pure domain logic (no I/O)
"""

from pet_registry.domain.services.avatar_keys import (
    ALLOWED_AVATAR_CONTENT_TYPES,
    avatar_key_prefix,
    build_avatar_key,
    extension_for,
    uploaded_photo_key,
)

__all__ = [
    "ALLOWED_AVATAR_CONTENT_TYPES",
    "avatar_key_prefix",
    "build_avatar_key",
    "extension_for",
    "uploaded_photo_key",
]
