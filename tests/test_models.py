from __future__ import annotations

import math

import pytest

from wonder_apps.models import FALLBACK_JOKE, Coordinate, Joke, JokeParseError


@pytest.mark.parametrize(
    "lat,lon",
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_coordinate_rejects_out_of_range_values(lat: float, lon: float) -> None:
    with pytest.raises(ValueError):
        Coordinate(lat, lon)


def test_coordinate_accepts_boundaries_and_is_immutable() -> None:
    coordinate = Coordinate(-90.0, 180.0)

    with pytest.raises(AttributeError):
        coordinate.latitude = 0.0  # type: ignore[misc]


def test_joke_from_payload_ignores_extra_fields() -> None:
    joke = Joke.from_payload({"id": 7, "type": "general", "setup": "Why?", "punchline": "Because."})
    assert joke == Joke(setup="Why?", punchline="Because.")


@pytest.mark.parametrize("payload", [[], {"setup": "only setup"}, {"setup": 1, "punchline": "x"}, "text"])
def test_joke_from_payload_rejects_bad_shapes(payload: object) -> None:
    with pytest.raises(JokeParseError):
        Joke.from_payload(payload)


def test_fallback_joke_text() -> None:
    assert FALLBACK_JOKE == Joke("Error", "Couldn't load joke")
