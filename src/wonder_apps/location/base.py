"""Boundary for device location providers and the permission handshake."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from wonder_apps.models import Coordinate

logger = logging.getLogger("wonder_apps.location")


class LocationError(RuntimeError):
    """Base error for failed location acquisition."""


class LocationPermissionError(LocationError):
    """Raised when the provider has not been authorised to read the location."""


class LocationUnavailableError(LocationError):
    """Raised when the provider cannot produce a location fix."""


class LocationProvider(Protocol):
    """Interface to the platform capability that reports the current position."""

    def current_location(self) -> Coordinate:
        """Return the current coordinate or raise a ``LocationError``."""

    def grant_permission(self) -> None:
        """Record that the user authorised location access."""


class PermissionAuthorizer(Protocol):
    """Interactive flow that asks the user for location access."""

    def request_permission(self) -> bool:
        """Return True when the user grants access."""


@dataclass(slots=True)
class StaticLocationProvider:
    """Provider that reports a fixed, configured coordinate."""

    coordinate: Coordinate | None
    granted: bool = False

    def current_location(self) -> Coordinate:
        if not self.granted:
            raise LocationPermissionError("Location permission has not been granted")
        if self.coordinate is None:
            raise LocationUnavailableError("No static location is configured")
        return self.coordinate

    def grant_permission(self) -> None:
        self.granted = True


async def acquire_location(provider: LocationProvider, authorizer: PermissionAuthorizer) -> Coordinate:
    """Read the current location, asking for permission once when it is missing."""
    try:
        return await asyncio.to_thread(provider.current_location)
    except LocationPermissionError:
        logger.info("location_permission_requested")
        granted = await asyncio.to_thread(authorizer.request_permission)
        if not granted:
            logger.warning("location_permission_denied")
            raise
        provider.grant_permission()

    return await asyncio.to_thread(provider.current_location)
