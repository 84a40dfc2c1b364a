from pet_registry.setup.ioc.container import (
    GatewayProvider,
    HandlerProvider,
    create_container,
)

__all__ = [
    "GatewayProvider",
    "HandlerProvider",
    "create_container",
]
