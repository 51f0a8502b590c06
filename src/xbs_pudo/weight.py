"""Shipment mass calculation."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from xbs_pudo.schemas import LineItem

MINIMUM_MASS_KG = Decimal("0.1")


def item_mass(item: LineItem) -> Decimal:
    """Mass of one order line in kilograms. Missing values count as zero."""
    grams = item.grams or Decimal(0)
    return grams * (item.quantity or 0) / 1000


def total_mass(
    items: Iterable[LineItem], minimum: Decimal = MINIMUM_MASS_KG
) -> Decimal:
    """Total mass in kilograms, never below ``minimum``."""
    total = sum((item_mass(item) for item in items), Decimal(0))
    return max(total, minimum)
