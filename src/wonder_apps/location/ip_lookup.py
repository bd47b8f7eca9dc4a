"""Approximate device location from an IP geolocation service.

Terminals have no GPS, so the closest stand-in for a device fix is the
position an IP geolocation endpoint associates with the public address.
Access still goes through the permission handshake because the lookup
sends the address to a third party.
"""

from __future__ import annotations

import logging

import httpx

from wonder_apps.models import Coordinate

from .base import LocationPermissionError, LocationUnavailableError

logger = logging.getLogger("wonder_apps.location.ip")


def _as_float(value: object) -> float | None:
    try:
        number = float(str(value))
    except (TypeError, ValueError):
        return None
    if number != number or abs(number) == float("inf"):
        return None
    return number


def coordinate_from_payload(payload: object) -> Coordinate | None:
    """Extract a coordinate from common IP geolocation response shapes."""
    if not isinstance(payload, dict):
        return None

    lat = _as_float(payload.get("latitude", payload.get("lat")))
    lon = _as_float(payload.get("longitude", payload.get("lon")))
    if lat is None or lon is None:
        return None

    try:
        return Coordinate(lat, lon)
    except ValueError:
        return None


class IpLocationProvider:
    """Provider backed by an HTTP IP geolocation endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 6.0,
        user_agent: str = "wonder-apps/0.1",
        granted: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._transport = transport
        self.granted = granted

    def grant_permission(self) -> None:
        self.granted = True

    def current_location(self) -> Coordinate:
        if not self.granted:
            raise LocationPermissionError("Location lookup needs permission to contact the IP geolocation service")

        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            ) as client:
                res = client.get(self._url)
                res.raise_for_status()
                data = res.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("ip_location_failed", extra={"url": self._url, "error": str(exc)})
            raise LocationUnavailableError(f"IP geolocation request failed: {exc}") from exc

        coordinate = coordinate_from_payload(data)
        if coordinate is None:
            raise LocationUnavailableError("IP geolocation response did not include a usable coordinate")
        return coordinate
