"""Shared fixtures for xbs-pudo tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from litestar import Litestar
from litestar.testing import TestClient

from xbs_pudo.app import create_app
from xbs_pudo.client import XbsClient
from xbs_pudo.config import PudoConfig
from xbs_pudo.orders import ShopifyOrderProvider

Reply = tuple[int, Any] | Callable[[dict], tuple[int, Any]]


FR_LOCATIONS = [
    {
        "Id": "FR-001",
        "Name": "Tabac du Louvre",
        "Address1": "1 Rue de Rivoli",
        "City": "Paris",
        "Zip": "75001",
        "CountryCode": "FR",
        "Carrier": "COLIS PRIVE",
        "Service": "CLLCT",
        "Latitude": "48.8606",
        "Longitude": "2.3376",
        "BusinessHours": "Mo-Sa 08:00-19:00",
    },
    {
        "Id": "FR-002",
        "Name": "Locker Châtelet",
        "Address1": "5 Place du Châtelet",
        "City": "Paris",
        "Zip": "75001",
        "CountryCode": "FR",
        "Carrier": "Colis Prive Locker",
        "Service": "CLLCT",
        "Latitude": 48.8584,
        "Longitude": 2.3470,
    },
    {
        "Id": "FR-003",
        "Name": "Relais Halles",
        "Address1": "12 Rue Berger",
        "City": "Paris",
        "Zip": "75001",
        "CountryCode": "FR",
        "Carrier": "Mondial Relay",
        "Service": "CLLCT",
        "Latitude": "48.8620",
        "Longitude": "2.3450",
    },
]

SHIPMENT_OK = {
    "ErrorLevel": 0,
    "Shipment": {
        "TrackingNumber": "XBS123456789",
        "ShipperReference": "SHOP-1001",
        "Carrier": "COLIS PRIVE",
        "LabelImage": "JVBERi0xLjQK",
        "LabelFormat": "PDF",
    },
}

SHOPIFY_ORDER = {
    "id": 450789469,
    "name": "#1001",
    "order_number": 1001,
    "email": "marie@example.com",
    "total_price": "45.00",
    "currency": "EUR",
    "shipping_address": {
        "first_name": "Marie",
        "last_name": "Curie",
        "address1": "11 Rue Pierre et Marie Curie",
        "address2": None,
        "city": "Paris",
        "zip": "75005",
        "province_code": None,
        "country_code": "FR",
        "phone": "+33100000000",
        "company": None,
    },
    "shipping_lines": [
        {"title": "France-Continent (Point Pack et Locker)", "price": "4.90"}
    ],
    "line_items": [
        {
            "title": "Ceramic mug",
            "quantity": 2,
            "grams": 350,
            "price": "20.05",
            "sku": "MUG-1",
        }
    ],
}


class FakeXbsTransport(httpx.AsyncBaseTransport):
    """Aggregator stub answering by ``Command`` and recording requests."""

    def __init__(self, replies: dict[str, Reply] | None = None) -> None:
        self.replies: dict[str, Reply] = dict(replies or {})
        self.requests: list[dict] = []
        self.urls: list[httpx.URL] = []

    def commands(self) -> list[str]:
        return [body["Command"] for body in self.requests]

    async def handle_async_request(self, request):
        body = json.loads(request.content)
        self.requests.append(body)
        self.urls.append(request.url)
        reply = self.replies.get(body["Command"])
        if reply is None:
            return httpx.Response(
                200,
                json={"ErrorLevel": 1, "Error": "Unknown command"},
                request=request,
            )
        status, payload = reply(body) if callable(reply) else reply
        if isinstance(payload, str):
            return httpx.Response(status, text=payload, request=request)
        return httpx.Response(status, json=payload, request=request)


class FakeShopifyTransport(httpx.AsyncBaseTransport):
    """Shopify Admin API stub serving orders by name."""

    def __init__(self, orders: list[dict] | None = None, status: int = 200):
        self.orders = orders or []
        self.status = status
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request):
        self.requests.append(request)
        if self.status != 200:
            return httpx.Response(
                self.status, json={"errors": "boom"}, request=request
            )
        name = request.url.params.get("name")
        matches = [o for o in self.orders if o.get("name") == name]
        return httpx.Response(200, json={"orders": matches}, request=request)


def make_config(**overrides: Any) -> PudoConfig:
    values = {
        "api_key": "test-key",
        "api_url": "https://xbs.test/",
        "shopify_domain": "shop.test",
        "shopify_access_token": "shpat_test",
    }
    values.update(overrides)
    return PudoConfig(**values)


@pytest.fixture()
def config() -> PudoConfig:
    return make_config()


@pytest.fixture()
def xbs_transport() -> FakeXbsTransport:
    return FakeXbsTransport(
        {
            "GetLocations": (200, {"ErrorLevel": 0, "Location": FR_LOCATIONS}),
            "GetLocationsDaily": (
                200,
                {"ErrorLevel": 0, "Location": FR_LOCATIONS},
            ),
            "OrderShipment": (200, SHIPMENT_OK),
        }
    )


@pytest.fixture()
def xbs_client(
    config: PudoConfig, xbs_transport: FakeXbsTransport
) -> XbsClient:
    return XbsClient(config, transport=xbs_transport)


@pytest.fixture()
def shopify_transport() -> FakeShopifyTransport:
    return FakeShopifyTransport([SHOPIFY_ORDER])


@pytest.fixture()
def order_provider(
    config: PudoConfig, shopify_transport: FakeShopifyTransport
) -> ShopifyOrderProvider:
    return ShopifyOrderProvider(config, transport=shopify_transport)


@pytest.fixture()
def test_app(
    config: PudoConfig,
    xbs_client: XbsClient,
    order_provider: ShopifyOrderProvider,
) -> Litestar:
    return create_app(
        config, xbs_client=xbs_client, order_provider=order_provider
    )


@pytest.fixture()
def client(test_app: Litestar) -> Iterator[TestClient]:
    with TestClient(app=test_app) as tc:
        yield tc
