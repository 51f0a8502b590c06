"""Carrier filtering and shipping-method classification."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from xbs_pudo.schemas import Order

logger = logging.getLogger(__name__)


def filter_by_carrier(
    points: list[dict[str, Any]],
    country: str,
    carriers: Mapping[str, str],
) -> list[dict[str, Any]]:
    """Keep only pickup points run by the carrier contracted for ``country``.

    ``carriers`` maps country codes to a carrier name fragment. The
    fragment is matched case-insensitively against each point's
    ``Carrier`` field. Countries without a contracted carrier are
    returned unchanged.
    """
    fragment = carriers.get(country.upper())
    if not fragment:
        return list(points)

    needle = fragment.lower()
    return [
        point
        for point in points
        if needle in str(point.get("Carrier") or "").lower()
    ]


def classify_order(order: Order, methods: Mapping[str, str]) -> str | None:
    """Return the pickup network country for an order, if any.

    ``methods`` maps shipping-method title fragments to country codes.
    Matching is case-sensitive; the first shipping line containing a
    known fragment wins.
    """
    for line in order.shipping_lines:
        for fragment, country in methods.items():
            if fragment in line.title:
                return country

    if order.shipping_lines:
        logger.warning(
            "Order %s has unrecognized shipping methods: %s",
            order.order_number,
            [line.title for line in order.shipping_lines],
        )
    return None
