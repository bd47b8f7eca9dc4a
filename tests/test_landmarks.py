from __future__ import annotations

import pytest

from wonder_apps.landmarks import WONDERS, get_wonder, is_catalog_wonder, list_wonders, wonder_by_index
from wonder_apps.models import Landmark


def test_catalog_has_seven_wonders_in_menu_order() -> None:
    names = [wonder.name for wonder in list_wonders()]

    assert names == [
        "Great Pyramid of Giza",
        "Great Wall of China",
        "Machu Picchu",
        "Christ the Redeemer",
        "Colosseum",
        "Taj Mahal",
        "Petra",
    ]


def test_every_wonder_has_a_valid_coordinate() -> None:
    for wonder in WONDERS:
        coordinate = wonder.coordinate
        assert coordinate.latitude == wonder.latitude
        assert coordinate.longitude == wonder.longitude


def test_list_wonders_returns_a_copy() -> None:
    listed = list_wonders()
    listed.clear()
    assert len(list_wonders()) == 7


def test_get_wonder_is_case_insensitive() -> None:
    assert get_wonder("  machu picchu ") == Landmark("Machu Picchu", -13.1631, -72.5450)
    assert get_wonder("Atlantis") is None


def test_wonder_by_index_is_one_based() -> None:
    assert wonder_by_index(1).name == "Great Pyramid of Giza"
    assert wonder_by_index(7).name == "Petra"
    with pytest.raises(IndexError):
        wonder_by_index(0)
    with pytest.raises(IndexError):
        wonder_by_index(8)


def test_is_catalog_wonder_requires_exact_entry() -> None:
    assert is_catalog_wonder(WONDERS[4])
    assert not is_catalog_wonder(Landmark("Colosseum", 0.0, 0.0))
