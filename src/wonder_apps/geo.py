"""Great-circle distance helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .models import Coordinate, Landmark

EARTH_RADIUS_KM = 6371.0
MILES_PER_KM = 0.621371
FOOTBALL_FIELDS_PER_MILE = 17.6


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def miles_to_football_fields(miles: float) -> float:
    return miles * FOOTBALL_FIELDS_PER_MILE


@dataclass(frozen=True, slots=True)
class DistanceReport:
    """Distance from the user to a wonder in the units shown on the result screen."""

    wonder: Landmark
    kilometres: float
    miles: float
    football_fields: float

    @classmethod
    def between(cls, user: Coordinate, wonder: Landmark) -> DistanceReport:
        km = distance_km(user, wonder.coordinate)
        miles = km_to_miles(km)
        return cls(
            wonder=wonder,
            kilometres=km,
            miles=miles,
            football_fields=miles_to_football_fields(miles),
        )
