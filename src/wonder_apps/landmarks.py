"""Fixed catalog of world wonders offered on the selection screen."""

from __future__ import annotations

from .models import Landmark

WONDERS: tuple[Landmark, ...] = (
    Landmark(name="Great Pyramid of Giza", latitude=29.9792, longitude=31.1342),
    Landmark(name="Great Wall of China", latitude=40.4319, longitude=116.5704),
    Landmark(name="Machu Picchu", latitude=-13.1631, longitude=-72.5450),
    Landmark(name="Christ the Redeemer", latitude=-22.9519, longitude=-43.2105),
    Landmark(name="Colosseum", latitude=41.8902, longitude=12.4922),
    Landmark(name="Taj Mahal", latitude=27.1751, longitude=78.0421),
    Landmark(name="Petra", latitude=30.3285, longitude=35.4444),
)

_WONDER_LOOKUP: dict[str, Landmark] = {wonder.name.casefold(): wonder for wonder in WONDERS}


def list_wonders() -> list[Landmark]:
    """Return all wonders in menu order."""
    return list(WONDERS)


def get_wonder(name: str) -> Landmark | None:
    """Return a wonder by name, ignoring case and surrounding whitespace."""
    return _WONDER_LOOKUP.get(name.strip().casefold())


def wonder_by_index(position: int) -> Landmark:
    """Return the wonder at a 1-based menu position."""
    if not 1 <= position <= len(WONDERS):
        raise IndexError(f"Wonder menu position must be between 1 and {len(WONDERS)}, got {position}")
    return WONDERS[position - 1]


def is_catalog_wonder(wonder: Landmark) -> bool:
    return _WONDER_LOOKUP.get(wonder.name.casefold()) == wonder
