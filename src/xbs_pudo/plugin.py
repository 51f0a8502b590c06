"""Router factory for xbs-pudo."""

from __future__ import annotations

from litestar import Router
from litestar.di import Provide

from xbs_pudo.client import XbsClient
from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import EXCEPTION_HANDLERS
from xbs_pudo.locations import LocationService
from xbs_pudo.orders import ShopifyOrderProvider
from xbs_pudo.protocols import OrderProvider
from xbs_pudo.routes.pages import health, pudo_selection
from xbs_pudo.routes.pudo import PudoController
from xbs_pudo.routes.shipments import ShipmentController
from xbs_pudo.shipments import ShipmentService


def create_pudo_router(
    *,
    config: PudoConfig,
    xbs_client: XbsClient | None = None,
    order_provider: OrderProvider | None = None,
    location_service: LocationService | None = None,
    shipment_service: ShipmentService | None = None,
) -> Router:
    """Create a configured Litestar router.

    Args:
        config: Service configuration.
        xbs_client: Aggregator client. Built from ``config`` if omitted.
        order_provider: Order source. Defaults to the Shopify provider.
        location_service: Pickup-point lookup. Owns the location cache,
            so one instance lives as long as the router.
        shipment_service: Shipment booking service.

    Returns:
        A Litestar Router with all PUDO endpoints.
    """
    client = xbs_client or XbsClient(config)
    orders = order_provider or ShopifyOrderProvider(config)
    locations = location_service or LocationService(client, config)
    shipments = shipment_service or ShipmentService(client, config)

    return Router(
        path="/",
        route_handlers=[
            health,
            pudo_selection,
            PudoController,
            ShipmentController,
        ],
        dependencies={
            "config": Provide(lambda: config, sync_to_thread=False),
            "xbs_client": Provide(lambda: client, sync_to_thread=False),
            "order_provider": Provide(lambda: orders, sync_to_thread=False),
            "location_service": Provide(
                lambda: locations,
                sync_to_thread=False,
            ),
            "shipment_service": Provide(
                lambda: shipments,
                sync_to_thread=False,
            ),
        },
        exception_handlers=EXCEPTION_HANDLERS,
    )
