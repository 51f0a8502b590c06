"""Order data from the Shopify Admin API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

import httpx
from pydantic import ValidationError

from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import OrderNotFoundError, OrderPlatformError
from xbs_pudo.protocols import OrderProvider
from xbs_pudo.schemas import Order

logger = logging.getLogger(__name__)

FailureReason = Literal["unconfigured", "not_found", "upstream"]


@dataclass(frozen=True)
class OrderLookup:
    """Outcome of an order fetch: either an order or a failure reason."""

    order: Order | None = None
    reason: FailureReason | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.order is not None

    @classmethod
    def found(cls, order: Order) -> OrderLookup:
        return cls(order=order)

    @classmethod
    def failed(cls, reason: FailureReason, error: str) -> OrderLookup:
        return cls(reason=reason, error=error)


def placeholder_order(order_number: str) -> Order:
    """Fixed order used when placeholder orders are enabled."""
    return Order.model_validate(
        {
            "order_number": order_number,
            "email": "customer@example.com",
            "total_price": "50.00",
            "currency": "EUR",
            "shipping_address": {
                "first_name": "Test",
                "last_name": "Customer",
                "address1": "123 Test Street",
                "address2": "",
                "city": "Paris",
                "zip": "75001",
                "country_code": "FR",
                "phone": "+33123456789",
            },
            "shipping_lines": [
                {
                    "title": "France-Continent (Point Pack et Locker)",
                    "price": "5.00",
                }
            ],
            "line_items": [
                {
                    "title": "Test Product",
                    "quantity": 1,
                    "price": "45.00",
                    "grams": 500,
                    "sku": "TEST-1",
                }
            ],
        }
    )


class ShopifyOrderProvider:
    """Reads orders from the Shopify Admin REST API by order name."""

    def __init__(
        self,
        config: PudoConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _get_base_url(self) -> str:
        domain = self._config.shopify_domain
        domain = domain.replace("https://", "").replace("http://", "")
        domain = domain.rstrip("/")
        version = self._config.shopify_api_version
        return f"https://{domain}/admin/api/{version}"

    def _get_headers(self) -> dict[str, str]:
        return {
            "X-Shopify-Access-Token": self._config.shopify_access_token,
            "Content-Type": "application/json",
        }

    async def fetch(self, order_number: str) -> OrderLookup:
        if not self._config.shopify_configured:
            return OrderLookup.failed(
                "unconfigured", "Shopify credentials are not configured"
            )

        name = order_number
        if not name.startswith("#"):
            name = f"#{name}"
        try:
            async with httpx.AsyncClient(
                timeout=self._config.request_timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    f"{self._get_base_url()}/orders.json",
                    params={"name": name, "status": "any"},
                    headers=self._get_headers(),
                )
        except httpx.RequestError as exc:
            return OrderLookup.failed(
                "upstream", f"Shopify request failed: {exc}"
            )

        if response.status_code != 200:
            return OrderLookup.failed(
                "upstream",
                f"Shopify responded with status {response.status_code}",
            )

        try:
            body = response.json()
            if not isinstance(body, dict) or not isinstance(
                body.get("orders", []), list
            ):
                return OrderLookup.failed(
                    "upstream", "Unexpected Shopify response body"
                )
            orders = body.get("orders") or []
            if not orders:
                return OrderLookup.failed(
                    "not_found", f"No order named {name}"
                )
            return OrderLookup.found(Order.model_validate(orders[0]))
        except (ValueError, ValidationError) as exc:
            return OrderLookup.failed(
                "upstream", f"Unexpected Shopify order payload: {exc}"
            )


async def resolve_order(
    provider: OrderProvider | None,
    order_number: str,
    *,
    allow_placeholder: bool = False,
) -> Order:
    """Fetch an order, substituting placeholder data only when allowed.

    Raises:
        OrderNotFoundError: The platform has no such order.
        OrderPlatformError: The platform is unconfigured or failed.
    """
    if provider is None:
        lookup = OrderLookup.failed(
            "unconfigured", "Order provider not configured"
        )
    else:
        lookup = await provider.fetch(order_number)

    if lookup.ok:
        return lookup.order

    if allow_placeholder:
        logger.warning(
            "Using placeholder data for order %s (%s: %s)",
            order_number,
            lookup.reason,
            lookup.error,
        )
        return placeholder_order(order_number)

    logger.error(
        "Could not fetch order %s (%s): %s",
        order_number,
        lookup.reason,
        lookup.error,
    )
    if lookup.reason == "not_found":
        raise OrderNotFoundError(order_number)
    raise OrderPlatformError(lookup.error)
