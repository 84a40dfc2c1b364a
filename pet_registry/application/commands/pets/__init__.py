"""Pet commands."""

from .register_pet import (
    MAX_PHOTO_SIZE_BYTES,
    RegisterPetCommand,
    RegisterPetHandler,
)
from .update_pet import UpdatePetCommand, UpdatePetHandler
from .delete_pet import DeletePetCommand, DeletePetHandler
from .generate_avatar_presigned_url import (
    PRESIGNED_URL_EXPIRATION_MINUTES,
    GenerateAvatarPresignedUrlHandler,
    GeneratePresignedUrlCommand,
)
from .confirm_avatar_upload import (
    ConfirmAvatarUploadCommand,
    ConfirmAvatarUploadHandler,
)

__all__ = [
    "MAX_PHOTO_SIZE_BYTES",
    "RegisterPetCommand",
    "RegisterPetHandler",
    "UpdatePetCommand",
    "UpdatePetHandler",
    "DeletePetCommand",
    "DeletePetHandler",
    "PRESIGNED_URL_EXPIRATION_MINUTES",
    "GeneratePresignedUrlCommand",
    "GenerateAvatarPresignedUrlHandler",
    "ConfirmAvatarUploadCommand",
    "ConfirmAvatarUploadHandler",
]
