"""Pickup-point lookup and shipment creation on top of the XBS aggregator."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "AggregatorError",
    "InvalidRequestError",
    "LocationService",
    "OrderNotFoundError",
    "OrderProvider",
    "PudoConfig",
    "ShipmentInput",
    "ShipmentService",
    "ShopifyOrderProvider",
    "XbsClient",
    "__version__",
    "create_app",
    "create_pudo_router",
]

if TYPE_CHECKING:
    from xbs_pudo.app import create_app
    from xbs_pudo.client import XbsClient
    from xbs_pudo.config import PudoConfig
    from xbs_pudo.exceptions import (
        AggregatorError,
        InvalidRequestError,
        OrderNotFoundError,
    )
    from xbs_pudo.locations import LocationService
    from xbs_pudo.orders import ShopifyOrderProvider
    from xbs_pudo.plugin import create_pudo_router
    from xbs_pudo.protocols import OrderProvider
    from xbs_pudo.schemas import ShipmentInput
    from xbs_pudo.shipments import ShipmentService


def __getattr__(name: str):
    # Lazy imports to avoid loading all submodules on package import.
    if name == "PudoConfig":
        from xbs_pudo.config import PudoConfig

        return PudoConfig
    if name == "create_app":
        from xbs_pudo.app import create_app

        return create_app
    if name == "create_pudo_router":
        from xbs_pudo.plugin import create_pudo_router

        return create_pudo_router
    if name == "XbsClient":
        from xbs_pudo.client import XbsClient

        return XbsClient
    if name == "LocationService":
        from xbs_pudo.locations import LocationService

        return LocationService
    if name == "ShipmentService":
        from xbs_pudo.shipments import ShipmentService

        return ShipmentService
    if name == "ShopifyOrderProvider":
        from xbs_pudo.orders import ShopifyOrderProvider

        return ShopifyOrderProvider
    if name == "OrderProvider":
        from xbs_pudo import protocols

        return getattr(protocols, name)
    if name == "ShipmentInput":
        from xbs_pudo import schemas

        return getattr(schemas, name)
    if name in (
        "AggregatorError",
        "InvalidRequestError",
        "OrderNotFoundError",
    ):
        from xbs_pudo import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module 'xbs_pudo' has no attribute {name!r}")
