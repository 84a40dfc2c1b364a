"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers, request models
- dependencies/: auth dependency injected into routes
"""
