"""Pickup-point, service and tracking endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar

from litestar import Controller, get
from litestar.params import Dependency, Parameter

from xbs_pudo.client import XbsClient
from xbs_pudo.exceptions import AggregatorError
from xbs_pudo.locations import LocationService

logger = logging.getLogger(__name__)


class PudoController(Controller):
    """Aggregator lookups: pickup points, services, tracking."""

    path = "/apps"
    tags: ClassVar[list[str]] = ["pudo"]

    @get("/xbs-pudo")
    async def search_pickup_points(
        self,
        location_service: Annotated[
            LocationService, Dependency(skip_validation=True)
        ],
        country: str | None = None,
        postal_code: Annotated[str | None, Parameter(query="zip")] = None,
        city: str | None = None,
    ) -> dict[str, Any]:
        """List pickup points of the contracted carrier for a country.

        ``zip`` (and ``city`` where the country needs it) narrows the
        search; without it the full daily list is returned.
        """
        result = await location_service.lookup(country, postal_code, city)
        return result.to_response()

    @get("/xbs-services")
    async def list_services(
        self,
        xbs_client: Annotated[XbsClient, Dependency(skip_validation=True)],
    ) -> dict[str, Any]:
        """Services available to the configured aggregator account."""
        data = await xbs_client.get_services()
        services = data.get("Services")
        if not isinstance(services, dict):
            raise AggregatorError(
                "XBS API returned no services", response=data
            )
        return {
            "success": True,
            "allowedServices": services.get("AllowedServices"),
            "allowedSpringClear": services.get("AllowedSpringClear"),
            "allServices": services.get("List"),
        }

    @get("/xbs-track/{tracking_number:str}")
    async def track_shipment(
        self,
        tracking_number: str,
        xbs_client: Annotated[XbsClient, Dependency(skip_validation=True)],
    ) -> dict[str, Any]:
        """Tracking events for one shipment."""
        data = await xbs_client.track_shipment(tracking_number)
        shipment = data.get("Shipment")
        if not isinstance(shipment, dict):
            raise AggregatorError(
                f"XBS API returned no shipment for {tracking_number}",
                response=data,
            )
        return {
            "success": True,
            "trackingNumber": shipment.get("TrackingNumber", tracking_number),
            "carrier": shipment.get("Carrier"),
            "events": shipment.get("Events") or [],
        }
