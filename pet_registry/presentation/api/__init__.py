"""
API Routers - FastAPI endpoint definitions.
"""

from pet_registry.presentation.api.pets import router as pets_router

__all__ = [
    "pets_router",
]
