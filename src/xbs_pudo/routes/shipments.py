"""Shipment endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar

from litestar import Controller, get, post
from litestar.params import Dependency
from litestar.status_codes import HTTP_200_OK

from xbs_pudo.carriers import classify_order
from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import InvalidRequestError
from xbs_pudo.orders import resolve_order
from xbs_pudo.protocols import OrderProvider
from xbs_pudo.schemas import CompleteOrderRequest, ShipmentInput
from xbs_pudo.shipments import ShipmentService, shipment_input_from_order

logger = logging.getLogger(__name__)


class ShipmentController(Controller):
    """Shipment creation and order completion endpoints."""

    path = "/apps"
    tags: ClassVar[list[str]] = ["shipments"]

    @post("/xbs-shipment", status_code=HTTP_200_OK)
    async def create_shipment(
        self,
        data: ShipmentInput,
        shipment_service: Annotated[
            ShipmentService, Dependency(skip_validation=True)
        ],
    ) -> dict[str, Any]:
        """Book a shipment, normally to a selected pickup point."""
        result = await shipment_service.create(data)
        return result.to_response()

    @post("/complete-inpost-order", status_code=HTTP_200_OK)
    async def complete_order(
        self,
        data: CompleteOrderRequest,
        config: Annotated[PudoConfig, Dependency(skip_validation=True)],
        shipment_service: Annotated[
            ShipmentService, Dependency(skip_validation=True)
        ],
        order_provider: Annotated[
            OrderProvider | None, Dependency(skip_validation=True)
        ] = None,
    ) -> dict[str, Any]:
        """Ship an order to the pickup point the customer picked.

        The destination country comes from the request, else from the
        order's shipping method, else from the configured fallback.
        """
        if not data.order_number:
            raise InvalidRequestError("Order number is required")
        if not data.pudo_location_id:
            raise InvalidRequestError("PUDO location must be selected")

        logger.info(
            "Completing order %s with PUDO %s",
            data.order_number,
            data.pudo_location_id,
        )
        order = await resolve_order(
            order_provider,
            data.order_number,
            allow_placeholder=config.placeholder_orders,
        )
        country = (
            data.country
            or classify_order(order, config.shipping_methods)
            or config.fallback_country
        ).upper()

        shipment_input = shipment_input_from_order(
            order, data.pudo_location_id, country, config
        )
        result = await shipment_service.create(shipment_input)

        response = {
            "success": True,
            "trackingNumber": result.tracking_number,
            "carrier": result.carrier,
            "country": country,
            "message": "Order successfully sent to InPost/Spring",
        }
        if result.warning:
            response["warning"] = result.warning
        return response

    @get("/check-inpost-order/{order_id:str}")
    async def check_order(self, order_id: str) -> dict[str, Any]:
        """Whether the order still needs a pickup point selected."""
        return {"needsPudoSelection": True, "orderId": order_id}
