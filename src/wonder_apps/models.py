from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class JokeParseError(ValueError):
    """Raised when a joke payload lacks string ``setup``/``punchline`` fields."""


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(f"Coordinate values must be finite: ({self.latitude}, {self.longitude})")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.longitude}")


@dataclass(frozen=True, slots=True)
class Landmark:
    name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Joke:
    setup: str
    punchline: str

    @classmethod
    def from_payload(cls, payload: Any) -> Joke:
        if not isinstance(payload, Mapping):
            raise JokeParseError(f"Expected a JSON object, got {type(payload).__name__}")
        setup = payload.get("setup")
        punchline = payload.get("punchline")
        if not isinstance(setup, str) or not isinstance(punchline, str):
            raise JokeParseError("Joke payload must contain string 'setup' and 'punchline' fields")
        return cls(setup=setup, punchline=punchline)


FALLBACK_JOKE = Joke(setup="Error", punchline="Couldn't load joke")
