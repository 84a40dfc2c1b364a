"""
Dishka DI Container Setup.

- GatewayProvider: infrastructure behind the domain ports (APP scope)
- HandlerProvider: command/query handlers (REQUEST scope)

Splitting them lets tests swap the gateways while keeping the real handler
wiring.

Flow:
  Container → provides → PetPersistenceGateway → to → UpdatePetHandler
                                ↓
            InMemoryPetPersistenceGateway or PrismaPetPersistenceGateway
"""

import logging
from collections.abc import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from pet_registry.application.commands.pets import (
    ConfirmAvatarUploadHandler,
    DeletePetHandler,
    GenerateAvatarPresignedUrlHandler,
    RegisterPetHandler,
    UpdatePetHandler,
)
from pet_registry.application.queries.pets import GetPetByIdHandler, ListPetsHandler
from pet_registry.config.settings import Config
from pet_registry.domain.ports import PetPersistenceGateway, PhotoStorageGateway
from pet_registry.infrastructure.persistence import InMemoryPetPersistenceGateway
from pet_registry.infrastructure.storage import S3PhotoStorageGateway, create_s3_client

logger = logging.getLogger(__name__)


class GatewayProvider(Provider):
    """Registers the port implementations selected by settings."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_pet_gateway(self) -> AsyncIterable[PetPersistenceGateway]:
        """
        Provide the pet persistence gateway (singleton, app-scoped).

        - "prisma": connects once at first use, disconnects on container close
        - "memory": process-local dict, lost on restart
        """
        if Config.PERSISTENCE_BACKEND == "prisma":
            # the generated client only exists after `prisma generate`
            from prisma import Prisma
            from pet_registry.infrastructure.persistence.prisma_pet_repository import (
                PrismaPetPersistenceGateway,
            )

            prisma = Prisma()
            await prisma.connect()
            logger.info("[Prisma] Connected")
            try:
                yield PrismaPetPersistenceGateway(prisma, page_size=Config.LIST_PAGE_SIZE)
            finally:
                await prisma.disconnect()
                logger.info("[Prisma] Disconnected")
        else:
            logger.info("[InMemory] Using in-memory pet storage")
            yield InMemoryPetPersistenceGateway()

    # ==================== OBJECT STORAGE ====================

    @provide(scope=Scope.APP)
    def get_photo_storage(self) -> PhotoStorageGateway:
        return S3PhotoStorageGateway(
            create_s3_client(),
            bucket_name=Config.S3_BUCKET_NAME,
            region=Config.AWS_REGION,
            public_base_url=Config.S3_PUBLIC_BASE_URL,
        )


class HandlerProvider(Provider):
    """Registers command and query handlers, one instance per request."""

    # ==================== COMMANDS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_pet_handler(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
    ) -> RegisterPetHandler:
        return RegisterPetHandler(
            pet_gateway,
            photo_storage,
            max_pets_per_user=Config.MAX_PETS_PER_USER or None,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_pet_handler(
        self, pet_gateway: PetPersistenceGateway
    ) -> UpdatePetHandler:
        return UpdatePetHandler(pet_gateway)

    @provide(scope=Scope.REQUEST)
    def get_delete_pet_handler(
        self, pet_gateway: PetPersistenceGateway
    ) -> DeletePetHandler:
        return DeletePetHandler(pet_gateway)

    @provide(scope=Scope.REQUEST)
    def get_generate_avatar_presigned_url_handler(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
    ) -> GenerateAvatarPresignedUrlHandler:
        return GenerateAvatarPresignedUrlHandler(pet_gateway, photo_storage)

    @provide(scope=Scope.REQUEST)
    def get_confirm_avatar_upload_handler(
        self,
        pet_gateway: PetPersistenceGateway,
        photo_storage: PhotoStorageGateway,
    ) -> ConfirmAvatarUploadHandler:
        return ConfirmAvatarUploadHandler(pet_gateway, photo_storage)

    # ==================== QUERIES ====================

    @provide(scope=Scope.REQUEST)
    def get_get_pet_by_id_handler(
        self, pet_gateway: PetPersistenceGateway
    ) -> GetPetByIdHandler:
        return GetPetByIdHandler(pet_gateway)

    @provide(scope=Scope.REQUEST)
    def get_list_pets_handler(
        self, pet_gateway: PetPersistenceGateway
    ) -> ListPetsHandler:
        return ListPetsHandler(pet_gateway)


def create_container(*gateway_providers: Provider) -> AsyncContainer:
    """
    Create the DI container.

    Args:
        gateway_providers: Replacements for GatewayProvider (tests pass
            in-memory fakes here). Defaults to GatewayProvider().
    """
    providers = gateway_providers or (GatewayProvider(),)
    return make_async_container(*providers, HandlerProvider())
