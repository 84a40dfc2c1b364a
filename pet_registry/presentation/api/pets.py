"""
Pets API Router - FastAPI endpoints for pet management.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Request models build commands, handlers do the work
- Domain errors are turned into HTTP responses by the app-level handler
  (see fastapi_app.py), so endpoints don't catch them

Flow:
  HTTP Request → Router → Validated[Command] → Handler → Gateway
                                            ↓
  HTTP Response ← Router ← DTO ← Result ←
"""

from datetime import date
from decimal import Decimal
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from pet_registry.application.commands.pets import (
    ConfirmAvatarUploadHandler,
    DeletePetCommand,
    DeletePetHandler,
    GenerateAvatarPresignedUrlHandler,
    RegisterPetHandler,
    UpdatePetHandler,
)
from pet_registry.application.common.validated import Invalid, Validated
from pet_registry.application.dto import (
    PetDTO,
    PetListDTO,
    PetListItemDTO,
    PresignedUrlDTO,
)
from pet_registry.application.queries.pets import (
    GetPetByIdHandler,
    GetPetByIdQuery,
    ListPetsHandler,
    ListPetsQuery,
)
from pet_registry.domain.entities.photo_upload import PhotoUpload
from pet_registry.domain.exceptions import DomainValidationError
from pet_registry.presentation.api.schemas import (
    ConfirmAvatarUploadRequest,
    GeneratePresignedUrlRequest,
    RegisterPetRequest,
    UpdatePetRequest,
)
from pet_registry.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


def _unwrap(validated: Validated):
    if isinstance(validated, Invalid):
        raise DomainValidationError(validated.error)
    return validated.value


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/pets", tags=["pets"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=PetDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register_pet(
    handler: FromDishka[RegisterPetHandler],
    current_user: AuthUser = Depends(get_current_user),
    name: str = Form(...),
    species: str = Form(...),
    age: int = Form(...),
    breed: Optional[str] = Form(default=None),
    birthdate: Optional[date] = Form(default=None),
    weight: Optional[Decimal] = Form(default=None),
    nickname: Optional[str] = Form(default=None),
    photo: Optional[UploadFile] = File(default=None),
):
    """
    Register a pet owned by the caller.

    Request: multipart/form-data
    - name, species, age (required)
    - breed, birthdate, weight, nickname (optional)
    - photo: image file, at most 5 MB (optional)
    """
    logger.info(f"[{current_user.user_id}] Processing pet registration")
    request = RegisterPetRequest(
        name=name,
        species=species,
        age=age,
        breed=breed,
        birthdate=birthdate,
        weight=weight,
        nickname=nickname,
    )

    upload = None
    if photo is not None and photo.filename:
        upload = PhotoUpload(
            file_name=photo.filename,
            content_type=photo.content_type or "application/octet-stream",
            data=await photo.read(),
        )

    command = _unwrap(request.to_command(current_user.user_id, upload))
    pet = await handler.execute(command)
    return PetDTO.from_entity(pet)


@router.get(
    "",
    response_model=PetListDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_pets(
    handler: FromDishka[ListPetsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's active pets."""
    pets = [
        PetListItemDTO.from_entity(pet)
        async for pet in handler.execute(ListPetsQuery(user_id=current_user.user_id))
    ]
    return PetListDTO(pets=pets, total=len(pets))


@router.get(
    "/{pet_id}",
    response_model=PetDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_pet(
    pet_id: str,
    handler: FromDishka[GetPetByIdHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    pet = await handler.execute(
        GetPetByIdQuery(pet_id=pet_id, user_id=current_user.user_id)
    )
    return PetDTO.from_entity(pet)


@router.patch(
    "/{pet_id}",
    response_model=PetDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def update_pet(
    pet_id: str,
    request: UpdatePetRequest,
    handler: FromDishka[UpdatePetHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Replace the editable fields of a pet.

    Request: {"name", "species", "breed", "age", "birthdate", "weight",
              "nickname", "photo_url"}
    """
    command = _unwrap(request.to_command(pet_id, current_user.user_id))
    pet = await handler.execute(command)
    return PetDTO.from_entity(pet)


@router.delete(
    "/{pet_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@inject
async def delete_pet(
    pet_id: str,
    handler: FromDishka[DeletePetHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Soft-delete a pet. Deleting twice is not an error."""
    await handler.execute(DeletePetCommand(pet_id=pet_id, user_id=current_user.user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{pet_id}/avatar/presign",
    response_model=PresignedUrlDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def generate_avatar_presigned_url(
    pet_id: str,
    request: GeneratePresignedUrlRequest,
    handler: FromDishka[GenerateAvatarPresignedUrlHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Issue a presigned PUT URL for the pet's avatar.

    Response: {"upload_url": "...", "key": "pets/{user}/{pet}/{file}.jpg",
               "expires_at": "2025-01-27T12:15:00Z"}
    """
    command = _unwrap(request.to_command(current_user.user_id, pet_id))
    presigned = await handler.execute(command)
    return PresignedUrlDTO.from_entity(presigned)


@router.post(
    "/{pet_id}/avatar/confirm",
    response_model=PetDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def confirm_avatar_upload(
    pet_id: str,
    request: ConfirmAvatarUploadRequest,
    handler: FromDishka[ConfirmAvatarUploadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Attach an uploaded avatar to the pet once it is in storage."""
    command = _unwrap(request.to_command(current_user.user_id, pet_id))
    pet = await handler.execute(command)
    return PetDTO.from_entity(pet)
