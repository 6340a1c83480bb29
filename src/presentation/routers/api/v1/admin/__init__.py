"""Admin API handlers.

Handler functions for operator repair endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.
All handlers require the admin role.

Handlers:
    resume_event_cancellations - Complete interrupted cancellation cascades
"""

from src.presentation.routers.api.v1.admin.event_cancellations import (
    resume_event_cancellations,
)

__all__ = [
    "resume_event_cancellations",
]
