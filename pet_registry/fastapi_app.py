"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, DI
and the domain error → HTTP mapping.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from pet_registry.application.dto import ErrorDTO
from pet_registry.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from pet_registry.config.settings import Config
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
from pet_registry.presentation.api import pets_router
from pet_registry.setup.ioc import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

logger = logging.getLogger(__name__)

# Checked in order, first match wins
DOMAIN_ERROR_STATUS = [
    (DomainValidationError, HTTPStatus.BAD_REQUEST, "VALIDATION_ERROR"),
    (UnauthorizedError, HTTPStatus.FORBIDDEN, "UNAUTHORIZED"),
    (PetNotFoundError, HTTPStatus.NOT_FOUND, "PET_NOT_FOUND"),
    (PhotoNotFoundError, HTTPStatus.NOT_FOUND, "PHOTO_NOT_FOUND"),
    (PetLimitExceededError, HTTPStatus.CONFLICT, "PET_LIMIT_EXCEEDED"),
    (PhotoSizeExceededError, HTTPStatus.REQUEST_ENTITY_TOO_LARGE, "PHOTO_SIZE_EXCEEDED"),
    (PhotoUploadError, HTTPStatus.BAD_GATEWAY, "PHOTO_UPLOAD_FAILED"),
]


def error_response(
    status_code: int, error: str, message: str, headers: Optional[dict] = None
) -> JSONResponse:
    body = ErrorDTO(
        error=error,
        message=message,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return JSONResponse(
        status_code=status_code, content=body.model_dump(), headers=headers
    )


def map_domain_error(exc: DomainError) -> tuple[HTTPStatus, str]:
    for error_type, status_code, code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, code
    return HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: nothing to do, gateways are created lazily by the container.
    Shutdown: close the DI container (disconnects Prisma).
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use. Built from settings when omitted.

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Pet Registry API",
        description="Pet registration and avatar uploads",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code, code = map_domain_error(exc)
        logger.warning(f"[{code}] {request.method} {request.url.path}: {exc.message}")
        return error_response(status_code, code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        logger.warning(f"[VALIDATION_ERROR] {request.method} {request.url.path}: {message}")
        return error_response(HTTPStatus.BAD_REQUEST, "VALIDATION_ERROR", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        code = HTTPStatus(exc.status_code).name
        return error_response(
            exc.status_code, code, str(exc.detail), headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[INTERNAL_ERROR] {type(exc).__name__}: {exc}")
        return error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal server error"
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(pets_router)

    return app
