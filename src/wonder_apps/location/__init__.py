"""Location providers and acquisition."""

from .base import (
    LocationError,
    LocationPermissionError,
    LocationProvider,
    LocationUnavailableError,
    PermissionAuthorizer,
    StaticLocationProvider,
    acquire_location,
)
from .ip_lookup import IpLocationProvider

__all__ = [
    "IpLocationProvider",
    "LocationError",
    "LocationPermissionError",
    "LocationProvider",
    "LocationUnavailableError",
    "PermissionAuthorizer",
    "StaticLocationProvider",
    "acquire_location",
]
