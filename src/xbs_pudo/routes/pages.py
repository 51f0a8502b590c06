"""Health check and customer-facing pages."""

from __future__ import annotations

from typing import Annotated

from litestar import get
from litestar.params import Parameter
from litestar.response import Template

COUNTRY_LABELS = {
    "PL": "🇵🇱 Polonia",
    "FR": "🇫🇷 Francia",
    "IT": "🇮🇹 Italia",
    "ES": "🇪🇸 España",
    "PT": "🇵🇹 Portugal",
}

ZIP_PLACEHOLDERS = {
    "FR": "Código postal francés (ej: 75001)",
    "PL": "Código postal polaco (ej: 00-001)",
}


@get("/health")
async def health() -> dict[str, str]:
    """Healthcheck endpoint."""
    return {"status": "ok"}


@get("/pudo-selection")
async def pudo_selection(
    order_id: Annotated[str | None, Parameter(query="orderId")] = None,
    order_number: Annotated[
        str | None, Parameter(query="orderNumber")
    ] = None,
    country: str | None = None,
) -> Template:
    """Render the pickup-point selection page for one order."""
    code = (country or "").upper()
    return Template(
        template_name="pudo_selection.html",
        context={
            "order_id": order_id or "",
            "order_number": order_number or "",
            "country": code or "FR",
            "country_label": COUNTRY_LABELS.get(code, "No especificado"),
            "zip_placeholder": ZIP_PLACEHOLDERS.get(
                code, "Código postal (ej: 75001)"
            ),
        },
    )
