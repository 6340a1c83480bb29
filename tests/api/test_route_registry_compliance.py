"""Route registry compliance tests.

The v1 router is generated from ROUTE_REGISTRY; these checks keep the
registry and the mounted application consistent.
"""

import pytest
from fastapi.routing import APIRoute

from src.core.config import settings
from src.main import app
from src.presentation.routers.api.v1.routes.metadata import AuthLevel, HTTPMethod
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


def _mounted() -> set[tuple[str, str]]:
    pairs = set()
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in route.methods:
                pairs.add((method, route.path))
    return pairs


@pytest.mark.api
class TestRouteRegistryCompliance:
    """Test ROUTE_REGISTRY against the FastAPI app."""

    @pytest.mark.parametrize(
        "metadata", ROUTE_REGISTRY, ids=lambda m: f"{m.method.value} {m.path}"
    )
    def test_registry_route_is_mounted(self, metadata):
        path = f"{settings.api_v1_prefix}{metadata.path}"

        assert (metadata.method.value, path) in _mounted()

    def test_operation_ids_unique(self):
        ids = [m.operation_id for m in ROUTE_REGISTRY]

        assert all(ids)
        assert len(ids) == len(set(ids))

    def test_no_duplicate_method_path(self):
        pairs = [(m.method, m.path) for m in ROUTE_REGISTRY]

        assert len(pairs) == len(set(pairs))

    def test_public_routes_are_reads(self):
        for metadata in ROUTE_REGISTRY:
            if metadata.auth_policy.level == AuthLevel.PUBLIC:
                assert metadata.method == HTTPMethod.GET, metadata.path

    def test_role_policies_name_roles(self):
        for metadata in ROUTE_REGISTRY:
            if metadata.auth_policy.level == AuthLevel.ROLES:
                assert metadata.auth_policy.roles, metadata.path

    def test_categories_registered_before_event_id(self):
        paths = [m.path for m in ROUTE_REGISTRY if m.method == HTTPMethod.GET]

        assert paths.index("/events/categories") < paths.index("/events/{event_id}")
