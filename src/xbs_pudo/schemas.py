"""Data models and request/response schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Order platform ---


class ShippingAddress(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    zip: str | None = None
    province_code: str | None = None
    country_code: str | None = None
    phone: str | None = None

    @property
    def full_name(self) -> str:
        if self.name:
            return self.name
        parts = [self.first_name or "", self.last_name or ""]
        return " ".join(p for p in parts if p)


class ShippingLine(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str = ""
    code: str | None = None
    price: str | None = None


class LineItem(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str = ""
    quantity: int | None = None
    grams: Decimal | None = None
    price: Decimal | None = None
    sku: str | None = None


class Order(BaseModel):
    """Order as read from the order platform. Never mutated here."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    order_number: str
    email: str | None = None
    total_price: Decimal = Decimal("0")
    currency: str = "EUR"
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    shipping_lines: list[ShippingLine] = Field(default_factory=list)
    line_items: list[LineItem] = Field(default_factory=list)


# --- Pickup points ---


class PickupPoint(CamelModel):
    id: str
    name: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    zip: str = ""
    country: str = ""
    carrier: str = ""
    service: str = ""
    latitude: float | None = None
    longitude: float | None = None
    business_hours: Any = ""

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class LocationSearchResult(BaseModel):
    country: str
    total_found: int
    filtered: int
    locations: list[PickupPoint]

    def to_response(self) -> dict[str, Any]:
        return {
            "success": True,
            "country": self.country,
            "totalFound": self.total_found,
            "filtered": self.filtered,
            "locations": [loc.to_response() for loc in self.locations],
        }


# --- Shipments ---


class ShipmentInput(CamelModel):
    """Payload for shipment creation.

    Addresses and products use the aggregator's own field names
    (``Name``, ``Address1``, ``Description``, ...).
    """

    order_id: str | None = None
    shipper_reference: str | None = None
    service: str | None = None
    weight: Decimal | None = None
    value: Decimal | None = None
    currency: str | None = None
    pudo_location_id: str | None = None
    consignor_address: dict[str, Any] | None = None
    consignee_address: dict[str, Any] | None = None
    products: list[dict[str, Any]] | None = None
    label_format: str | None = None


class ShipmentResult(CamelModel):
    tracking_number: str
    shipper_reference: str | None = None
    carrier: str | None = None
    label_image: str | None = None
    label_format: str | None = None
    warning: str | None = None

    def to_response(self) -> dict[str, Any]:
        return {"success": True, **super().to_response()}


class CompleteOrderRequest(CamelModel):
    order_id: str | None = None
    order_number: str | None = None
    pudo_location_id: str | None = None
    country: str | None = None
