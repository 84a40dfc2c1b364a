from http import HTTPStatus

import pytest

from pet_registry.domain.exceptions import (
    DomainError,
    DomainValidationError,
    PetLimitExceededError,
    PetNotFoundError,
    PhotoNotFoundError,
    PhotoSizeExceededError,
    PhotoUploadError,
    UnauthorizedError,
)
from pet_registry.fastapi_app import map_domain_error


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (DomainValidationError("bad"), HTTPStatus.BAD_REQUEST, "VALIDATION_ERROR"),
        (UnauthorizedError(), HTTPStatus.FORBIDDEN, "UNAUTHORIZED"),
        (PetNotFoundError("pet-1"), HTTPStatus.NOT_FOUND, "PET_NOT_FOUND"),
        (PhotoNotFoundError("k"), HTTPStatus.NOT_FOUND, "PHOTO_NOT_FOUND"),
        (PetLimitExceededError("user-1", 5), HTTPStatus.CONFLICT, "PET_LIMIT_EXCEEDED"),
        (
            PhotoSizeExceededError(6_000_000, 5_000_000),
            HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
            "PHOTO_SIZE_EXCEEDED",
        ),
        (PhotoUploadError("s3 down"), HTTPStatus.BAD_GATEWAY, "PHOTO_UPLOAD_FAILED"),
        (DomainError("other"), HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
    ],
)
def test_domain_errors_map_to_http(error, status_code, code):
    assert map_domain_error(error) == (status_code, code)
