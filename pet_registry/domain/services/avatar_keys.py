"""
Avatar key layout in the object store.

Every avatar lives under pets/{user_id}/{pet_id}/ so a confirmed key can be
checked against the caller and the pet it claims to belong to.
"""

from pathlib import PurePosixPath
from typing import Optional
from uuid import uuid4

ALLOWED_AVATAR_CONTENT_TYPES = ("image/jpeg", "image/png")

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
}


def extension_for(content_type: str) -> str:
    return _EXTENSIONS.get(content_type, "bin")


def avatar_key_prefix(user_id: str, pet_id: str) -> str:
    return f"pets/{user_id}/{pet_id}/"


def build_avatar_key(
    user_id: str, pet_id: str, content_type: str, file_name: Optional[str] = None
) -> str:
    """Key for a new avatar. A random file name is used unless one is given."""
    file_name = file_name or uuid4().hex
    return f"{avatar_key_prefix(user_id, pet_id)}{file_name}.{extension_for(content_type)}"


def uploaded_photo_key(user_id: str, pet_id: str, file_name: str) -> str:
    """
    Key for a photo sent with the registration request.

    Only the last path segment of the client's file name is kept, so a
    name like "../x.jpg" cannot leave the pet's prefix.
    """
    base_name = PurePosixPath(file_name.replace("\\", "/")).name
    if base_name in ("", ".", ".."):
        base_name = uuid4().hex
    return f"{avatar_key_prefix(user_id, pet_id)}{base_name}"
