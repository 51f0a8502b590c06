"""Shipment request building and booking."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from xbs_pudo.client import XbsClient, error_level
from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import AggregatorError, InvalidRequestError
from xbs_pudo.schemas import Order, ShipmentInput, ShipmentResult
from xbs_pudo.weight import item_mass, total_mass

logger = logging.getLogger(__name__)

RECIPIENT_FIELDS = (
    "Name",
    "Company",
    "Address1",
    "Address2",
    "Address3",
    "City",
    "State",
    "Zip",
    "CountryCode",
    "Phone",
    "Email",
    "Vat",
)


def _decimal_string(value: Decimal, places: int) -> str:
    text = f"{value:.{places}f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def _quantity(product: dict[str, Any]) -> int:
    quantity = product.get("Quantity")
    return 1 if quantity is None else int(quantity)


def _declared_value(products: list[dict[str, Any]]) -> Decimal:
    try:
        return sum(
            (
                Decimal(str(p.get("Value") or 0)) * _quantity(p)
                for p in products
            ),
            Decimal(0),
        )
    except (TypeError, ValueError, InvalidOperation) as exc:
        raise InvalidRequestError(
            "Products must carry numeric Value and Quantity"
        ) from exc


def _shipper_reference(
    data: ShipmentInput, now: Callable[[], float]
) -> str:
    if data.shipper_reference:
        return data.shipper_reference
    if data.order_id:
        return f"SHOP-{data.order_id}-{int(now())}"
    return f"SHOP-{int(now() * 1000)}"


def validate_shipment_input(data: ShipmentInput, config: PudoConfig) -> None:
    """Raise InvalidRequestError when required shipment fields are absent."""
    missing = [
        name
        for name, present in (
            ("consigneeAddress", bool(data.consignee_address)),
            ("products", bool(data.products)),
            ("weight", data.weight is not None),
        )
        if not present
    ]
    if missing:
        raise InvalidRequestError(
            f"Missing required fields: {', '.join(missing)}"
        )
    # Weight is sent with three decimals; anything rounding to zero is lost.
    if data.weight.quantize(Decimal("0.001")) <= 0:
        raise InvalidRequestError(
            f"Weight must be at least 0.001 kg, got {data.weight}"
        )

    service = data.service or config.default_service
    if service in config.pudo_services and not data.pudo_location_id:
        raise InvalidRequestError(
            f"Service {service!r} requires pudoLocationId "
            "(a selected pickup point)"
        )


def build_shipment_request(
    data: ShipmentInput,
    config: PudoConfig,
    now: Callable[[], float] = time.time,
) -> dict[str, Any]:
    """Assemble the ``Shipment`` object of an OrderShipment command."""
    validate_shipment_input(data, config)

    consignor = {
        **config.sender.as_address(),
        **{k: v for k, v in (data.consignor_address or {}).items() if v},
    }
    consignee = {
        **dict.fromkeys(RECIPIENT_FIELDS, ""),
        **data.consignee_address,
    }
    products = [
        {**product, "HsCode": product.get("HsCode") or config.default_hs_code}
        for product in data.products
    ]
    value = data.value if data.value is not None else _declared_value(products)

    shipment = {
        "LabelFormat": data.label_format or config.label_format,
        "ShipperReference": _shipper_reference(data, now),
        "Service": data.service or config.default_service,
        "Weight": _decimal_string(data.weight, 3),
        "WeightUnit": "kg",
        "Value": _decimal_string(value, 2),
        "Currency": data.currency or config.default_currency,
        "CustomsDuty": "DDU",
        "Description": ", ".join(
            str(p["Description"]) for p in products if p.get("Description")
        ),
        "DeclarationType": "SaleOfGoods",
        "DangerousGoods": "N",
        "ConsignorAddress": consignor,
        "ConsigneeAddress": consignee,
        "Products": products,
    }
    if data.pudo_location_id:
        # The PUDO service reads the point from the consignee address too.
        shipment["PudoLocationId"] = data.pudo_location_id
        consignee["PudoLocationId"] = data.pudo_location_id
    return shipment


def parse_shipment_response(data: dict[str, Any]) -> ShipmentResult:
    """Interpret an OrderShipment response.

    A tracking number means the booking went through, even when the
    aggregator also reports a non-zero error level; that message is
    kept as ``warning``.
    """
    shipment = data.get("Shipment") or {}
    tracking_number = shipment.get("TrackingNumber")
    level = error_level(data)
    if not tracking_number:
        reason = data.get("Error") or "no tracking number returned"
        raise AggregatorError(
            f"XBS API Error: {reason}",
            error_level=level,
            response=data,
        )

    warning = None
    if level != 0:
        warning = data.get("Error") or f"ErrorLevel {level}"
        logger.warning(
            "Shipment %s booked with warning: %s", tracking_number, warning
        )
    return ShipmentResult(
        tracking_number=tracking_number,
        shipper_reference=shipment.get("ShipperReference"),
        carrier=shipment.get("Carrier"),
        label_image=shipment.get("LabelImage"),
        label_format=shipment.get("LabelFormat"),
        warning=warning,
    )


class ShipmentService:
    """Builds shipment requests and books them with the aggregator."""

    def __init__(
        self,
        client: XbsClient,
        config: PudoConfig,
        now: Callable[[], float] = time.time,
    ) -> None:
        self._client = client
        self._config = config
        self._now = now

    async def create(self, data: ShipmentInput) -> ShipmentResult:
        shipment = build_shipment_request(data, self._config, now=self._now)
        logger.info(
            "Creating XBS shipment %s with PUDO %s",
            shipment["ShipperReference"],
            data.pudo_location_id,
        )
        response = await self._client.order_shipment(shipment)
        result = parse_shipment_response(response)
        logger.info("Shipment created: %s", result.tracking_number)
        return result


def shipment_input_from_order(
    order: Order,
    pudo_location_id: str,
    country: str,
    config: PudoConfig,
) -> ShipmentInput:
    """Derive shipment fields for an order sent to a pickup point."""
    address = order.shipping_address
    return ShipmentInput(
        shipper_reference=f"SHOP-{order.order_number}",
        weight=total_mass(order.line_items),
        value=order.total_price,
        currency=order.currency,
        pudo_location_id=pudo_location_id,
        consignee_address={
            "Name": address.full_name,
            "Company": address.company or "",
            "Address1": address.address1 or "",
            "Address2": address.address2 or "",
            "City": address.city or "",
            "State": address.province_code or "",
            "Zip": address.zip or "",
            "CountryCode": country,
            "Phone": address.phone or "",
            "Email": order.email or "",
        },
        products=[
            {
                "Description": item.title,
                "Sku": item.sku or "",
                "Quantity": item.quantity or 0,
                "Weight": float(item_mass(item)),
                "Value": float(item.price or 0),
                "Currency": order.currency,
            }
            for item in order.line_items
        ],
    )
