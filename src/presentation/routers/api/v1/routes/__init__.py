"""API Route Registry package.

The registry is the single source of truth for all v1 routes.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, ErrorSpec, etc.)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "IdempotencyLevel",
    "RouteMetadata",
]
