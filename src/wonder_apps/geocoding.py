from __future__ import annotations

import logging
from typing import Protocol

import httpx

from .models import Coordinate

FALLBACK_PLACE_NAME = "your location"
LOCALITY_KEYS = ("city", "town", "village", "municipality", "hamlet", "locality")

logger = logging.getLogger("wonder_apps.geocoding")


class ReverseGeocoder(Protocol):
    def locality(self, coordinate: Coordinate) -> str | None:
        """Return a best-effort place name for the coordinate."""


class DisabledReverseGeocoder:
    def locality(self, coordinate: Coordinate) -> str | None:
        return None


def locality_from_address(address: object) -> str | None:
    if not isinstance(address, dict):
        return None
    for key in LOCALITY_KEYS:
        value = address.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class NominatimReverseGeocoder:
    """Reverse geocoder backed by a Nominatim ``/reverse`` endpoint."""

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        *,
        user_agent: str = "wonder-apps/0.1",
        timeout_seconds: float = 6.0,
        zoom: int = 10,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout_seconds = timeout_seconds
        self._zoom = max(0, min(zoom, 18))
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            headers={"User-Agent": self._user_agent},
            transport=self._transport,
        )

    def locality(self, coordinate: Coordinate) -> str | None:
        params = {
            "lat": str(coordinate.latitude),
            "lon": str(coordinate.longitude),
            "format": "jsonv2",
            "addressdetails": "1",
            "zoom": str(self._zoom),
        }

        with self._client() as client:
            res = client.get("/reverse", params=params)
            res.raise_for_status()
            data = res.json()

        if not isinstance(data, dict):
            return None
        return locality_from_address(data.get("address"))


def describe_location(geocoder: ReverseGeocoder, coordinate: Coordinate) -> str:
    """Return the locality for the coordinate, or a generic fallback when lookup fails."""
    try:
        name = geocoder.locality(coordinate)
    except Exception as exc:  # noqa: BLE001 - geocoding is best-effort.
        logger.warning("reverse_geocode_failed", extra={"error": f"{type(exc).__name__}: {exc}"})
        return FALLBACK_PLACE_NAME
    return name or FALLBACK_PLACE_NAME
