"""Pickup-point lookup with an optional per-country cache."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from xbs_pudo.carriers import filter_by_carrier
from xbs_pudo.client import XbsClient
from xbs_pudo.config import PudoConfig
from xbs_pudo.exceptions import InvalidRequestError
from xbs_pudo.schemas import LocationSearchResult, PickupPoint

logger = logging.getLogger(__name__)


def _coordinate(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_pickup_point(record: dict[str, Any]) -> PickupPoint:
    """Reshape an aggregator location record into a PickupPoint."""
    return PickupPoint(
        id=str(record.get("Id") or ""),
        name=record.get("Name") or "",
        address1=record.get("Address1") or "",
        address2=record.get("Address2") or "",
        city=record.get("City") or "",
        zip=record.get("Zip") or "",
        country=record.get("CountryCode") or "",
        carrier=record.get("Carrier") or "",
        service=record.get("Service") or "",
        latitude=_coordinate(record.get("Latitude")),
        longitude=_coordinate(record.get("Longitude")),
        business_hours=record.get("BusinessHours") or "",
    )


@dataclass
class CacheEntry:
    expires_at: float
    result: LocationSearchResult


class LocationCache:
    """Time-expiring lookup results keyed by country code.

    With ``max_entries`` set, storing a new country evicts the oldest
    entries first; ``max_entries=1`` keeps a single slot.

    Concurrent misses for the same country both hit the aggregator and
    the last one to finish wins.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, country: str) -> LocationSearchResult | None:
        entry = self._entries.get(country)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[country]
            return None
        return entry.result

    def set(self, country: str, result: LocationSearchResult) -> None:
        self._entries.pop(country, None)
        if self._max_entries:
            while len(self._entries) >= self._max_entries:
                evicted = next(iter(self._entries))
                del self._entries[evicted]
                logger.debug("Evicted cached pickup points for %s", evicted)
        self._entries[country] = CacheEntry(
            expires_at=self._clock() + self._ttl, result=result
        )

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class LocationService:
    """Finds pickup points for a country through the aggregator."""

    def __init__(
        self,
        client: XbsClient,
        config: PudoConfig,
        cache: LocationCache | None = None,
    ) -> None:
        self._client = client
        self._config = config
        if cache is None and config.cache_enabled:
            cache = LocationCache(
                config.cache_ttl_seconds,
                max_entries=config.cache_max_countries,
            )
        self.cache = cache

    def _validate_country(self, country: str | None) -> str:
        if not country or not country.strip():
            raise InvalidRequestError(
                "Country query param is required, e.g. ?country=FR"
            )
        code = country.strip().upper()
        allowed = [c.upper() for c in self._config.allowed_countries]
        if allowed and code not in allowed:
            raise InvalidRequestError(
                f"Unsupported country {code!r}; "
                f"supported: {', '.join(allowed)}"
            )
        return code

    def _needs_city(self, country: str) -> bool:
        required = [c.upper() for c in self._config.city_required_countries]
        return country in required

    async def lookup(
        self,
        country: str | None,
        postal_code: str | None = None,
        city: str | None = None,
    ) -> LocationSearchResult:
        code = self._validate_country(country)

        if self.cache is not None:
            cached = self.cache.get(code)
            if cached is not None:
                logger.info("Pickup points for %s served from cache", code)
                return cached

        needs_city = self._needs_city(code)
        if postal_code and (city or not needs_city):
            data = await self._client.get_locations(
                code, postal_code, city if needs_city else None
            )
        else:
            data = await self._client.get_locations_daily(code)

        points = data.get("Location") or []
        if isinstance(points, dict):
            points = [points]
        logger.info("Found %d locations for %s", len(points), code)

        filtered = filter_by_carrier(points, code, self._config.carriers)
        logger.info(
            "Filtered to %d locations for carrier requirements", len(filtered)
        )

        result = LocationSearchResult(
            country=code,
            total_found=len(points),
            filtered=len(filtered),
            locations=[to_pickup_point(record) for record in filtered],
        )
        if self.cache is not None:
            self.cache.set(code, result)
        return result
