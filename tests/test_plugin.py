"""Plugin tests."""

from litestar import Litestar, Router
from litestar.testing import TestClient

from xbs_pudo.client import XbsClient
from xbs_pudo.exceptions import EXCEPTION_HANDLERS
from xbs_pudo.locations import LocationService
from xbs_pudo.plugin import create_pudo_router

from conftest import make_config


def test_create_pudo_router_returns_router() -> None:
    router = create_pudo_router(config=make_config())

    assert isinstance(router, Router)


def test_router_has_exception_handlers() -> None:
    """Router includes EXCEPTION_HANDLERS."""
    router = create_pudo_router(config=make_config())
    for exc_type, handler_fn in EXCEPTION_HANDLERS.items():
        assert exc_type in router.exception_handlers
        assert router.exception_handlers[exc_type] is handler_fn


def test_router_has_route_handlers() -> None:
    """Router exposes the page, lookup and shipment routes."""
    router = create_pudo_router(config=make_config())
    paths = {route.path for route in router.routes}
    assert "/health" in paths
    assert "/pudo-selection" in paths
    assert "/apps/xbs-pudo" in paths
    assert "/apps/xbs-shipment" in paths
    assert "/apps/complete-inpost-order" in paths


def test_dependencies_are_registered() -> None:
    """Router provides every service the handlers ask for."""
    router = create_pudo_router(config=make_config())
    for name in (
        "config",
        "xbs_client",
        "order_provider",
        "location_service",
        "shipment_service",
    ):
        assert name in router.dependencies


def test_health_endpoint_accessible() -> None:
    """Health endpoint returns 200 with status ok."""
    app = Litestar(route_handlers=[create_pudo_router(config=make_config())])
    with TestClient(app=app) as client:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


def test_supplied_location_service_is_used() -> None:
    """A caller-built service replaces the default one."""
    config = make_config()
    service = LocationService(XbsClient(config), config)
    router = create_pudo_router(config=config, location_service=service)
    provider = router.dependencies["location_service"]
    assert provider.dependency() is service
