from __future__ import annotations

import httpx

from wonder_apps.geocoding import (
    FALLBACK_PLACE_NAME,
    DisabledReverseGeocoder,
    NominatimReverseGeocoder,
    describe_location,
    locality_from_address,
)
from wonder_apps.models import Coordinate

LISBON = Coordinate(38.7223, -9.1393)


class BrokenGeocoder:
    def locality(self, coordinate: Coordinate) -> str | None:
        raise httpx.ConnectError("offline")


def test_locality_prefers_city_then_smaller_places() -> None:
    assert locality_from_address({"city": "Lisboa", "town": "Other"}) == "Lisboa"
    assert locality_from_address({"village": " Sintra "}) == "Sintra"
    assert locality_from_address({"country": "Portugal"}) is None
    assert locality_from_address(None) is None


def test_nominatim_reverse_lookup() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"display_name": "Lisboa, Portugal", "address": {"city": "Lisboa"}})

    geocoder = NominatimReverseGeocoder(
        "https://nominatim.example/",
        user_agent="wonder-tests",
        transport=httpx.MockTransport(handler),
    )

    assert geocoder.locality(LISBON) == "Lisboa"
    request = seen[0]
    assert request.url.path == "/reverse"
    assert request.url.params["lat"] == "38.7223"
    assert request.url.params["lon"] == "-9.1393"
    assert request.url.params["format"] == "jsonv2"
    assert request.headers["User-Agent"] == "wonder-tests"


def test_describe_location_uses_locality() -> None:
    geocoder = NominatimReverseGeocoder(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"address": {"town": "Cascais"}})),
    )
    assert describe_location(geocoder, LISBON) == "Cascais"


def test_describe_location_falls_back_on_missing_locality() -> None:
    geocoder = NominatimReverseGeocoder(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"error": "Unable to geocode"})),
    )
    assert describe_location(geocoder, LISBON) == FALLBACK_PLACE_NAME
    assert describe_location(DisabledReverseGeocoder(), LISBON) == "your location"


def test_describe_location_falls_back_on_errors() -> None:
    failing_http = NominatimReverseGeocoder(
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    assert describe_location(failing_http, LISBON) == FALLBACK_PLACE_NAME
    assert describe_location(BrokenGeocoder(), LISBON) == FALLBACK_PLACE_NAME
