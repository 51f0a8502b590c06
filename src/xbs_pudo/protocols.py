"""Service protocol extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xbs_pudo.orders import OrderLookup

__all__ = [
    "OrderProvider",
]


@runtime_checkable
class OrderProvider(Protocol):
    """Read access to orders on the e-commerce platform.

    Implementations never raise for platform failures; the outcome is
    reported through the returned lookup so callers decide whether a
    placeholder order is acceptable.
    """

    async def fetch(self, order_number: str) -> OrderLookup:
        """Fetch one order by its customer-facing number."""
        ...
