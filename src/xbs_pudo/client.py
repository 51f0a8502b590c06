"""Client for the XBS shipping aggregator.

The aggregator exposes a single JSON endpoint. Every request carries the
API key and a ``Command`` name; every response carries an ``ErrorLevel``
(0 means success) and an optional ``Error`` message.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import AggregatorError, ConfigurationError

logger = logging.getLogger(__name__)


def error_level(data: dict[str, Any]) -> int:
    """Read ``ErrorLevel`` from a response body, treating junk as failure."""
    try:
        return int(data.get("ErrorLevel", 0))
    except (TypeError, ValueError):
        return -1


class XbsClient:
    """Sends commands to the aggregator and translates its failures.

    Args:
        config: Service configuration (API key, URL, timeout).
        transport: Optional httpx transport, used by tests to stub the
            remote endpoint.
    """

    def __init__(
        self,
        config: PudoConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def _params(self) -> dict[str, str]:
        return {"testMode": "1"} if self._config.test_mode else {}

    async def call(
        self, command: str, *, check: bool = True, **fields: Any
    ) -> dict[str, Any]:
        """Send ``command`` with extra top-level ``fields``.

        Raises:
            AggregatorError: On transport failure, timeout, non-2xx
                status, an unparsable body or, when ``check`` is set,
                a non-zero error level.
            ConfigurationError: No API key is configured.
        """
        if not self._config.api_key:
            raise ConfigurationError(
                "XBS API key is not configured (XBS_API_KEY)"
            )
        body = {"Apikey": self._config.api_key, "Command": command, **fields}
        logger.info("XBS %s request", command)
        logger.debug("XBS %s payload: %s", command, fields)

        try:
            async with httpx.AsyncClient(
                timeout=self._config.request_timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._config.api_url, params=self._params, json=body
                )
        except httpx.TimeoutException as exc:
            raise AggregatorError(
                f"XBS API timed out after {self._config.request_timeout}s"
            ) from exc
        except httpx.RequestError as exc:
            raise AggregatorError(f"XBS API request failed: {exc}") from exc

        if response.is_error:
            raise AggregatorError(
                f"XBS API responded with status {response.status_code}",
                status_code=response.status_code,
                response=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise AggregatorError(
                "XBS API returned an invalid JSON body",
                status_code=response.status_code,
                response=response.text,
            ) from exc
        if not isinstance(data, dict):
            raise AggregatorError(
                "XBS API returned an unexpected body", response=data
            )

        level = error_level(data)
        logger.info("XBS %s response ErrorLevel: %s", command, level)
        if check and level != 0:
            raise AggregatorError(
                f"XBS API Error: {data.get('Error') or 'Unknown error'}",
                error_level=level,
                response=data,
            )
        return data

    async def get_locations(
        self, country: str, postal_code: str, city: str | None = None
    ) -> dict[str, Any]:
        location = {"Country": country, "Zip": postal_code}
        if city:
            location["City"] = city
        return await self.call("GetLocations", Location=location)

    async def get_locations_daily(self, country: str) -> dict[str, Any]:
        return await self.call(
            "GetLocationsDaily",
            Location={"Country": country, "ShowTemporaryOutOfService": False},
        )

    async def order_shipment(self, shipment: dict[str, Any]) -> dict[str, Any]:
        # The caller decides on error levels: a booking may succeed with
        # a warning attached.
        return await self.call("OrderShipment", check=False, Shipment=shipment)

    async def get_services(self) -> dict[str, Any]:
        return await self.call("GetServices")

    async def track_shipment(self, tracking_number: str) -> dict[str, Any]:
        return await self.call(
            "TrackShipment", Shipment={"TrackingNumber": tracking_number}
        )
