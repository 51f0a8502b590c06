"""Pickup-point selection page tests."""

from __future__ import annotations

from litestar.testing import TestClient


def test_page_renders_order_and_country(client: TestClient) -> None:
    resp = client.get(
        "/pudo-selection",
        params={
            "orderId": "450789469",
            "orderNumber": "1001",
            "country": "pl",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "1001" in resp.text
    assert "Polonia" in resp.text
    assert 'const country = "PL";' in resp.text
    assert 'const orderId = "450789469";' in resp.text
    assert "00-001" in resp.text


def test_page_defaults_without_country(client: TestClient) -> None:
    resp = client.get("/pudo-selection")

    assert resp.status_code == 200
    assert "No especificado" in resp.text
    assert 'const country = "FR";' in resp.text


def test_page_escapes_order_number(client: TestClient) -> None:
    resp = client.get(
        "/pudo-selection",
        params={"orderNumber": "<script>alert(1)</script>"},
    )

    assert resp.status_code == 200
    assert "<script>alert(1)</script>" not in resp.text
    assert "&lt;script&gt;" in resp.text


def test_page_talks_to_the_lookup_and_completion_routes(
    client: TestClient,
) -> None:
    resp = client.get("/pudo-selection", params={"country": "FR"})

    assert "/apps/xbs-pudo" in resp.text
    assert "/apps/complete-inpost-order" in resp.text
