from __future__ import annotations

import asyncio
import logging

from .flow import AppState, InvalidTransitionError, Result, Select, SessionClosedError, Welcome, WonderFlow
from .geo import DistanceReport
from .geocoding import ReverseGeocoder, describe_location
from .location import (
    LocationError,
    LocationPermissionError,
    LocationProvider,
    PermissionAuthorizer,
    acquire_location,
)
from .models import Coordinate, Landmark
from .tasks import ScreenTasks

PERMISSION_DENIED_NOTICE = "Location permission was denied. Allow location access to get started."
LOCATION_UNAVAILABLE_NOTICE = "Could not determine your location. Please try again."


class WonderDistanceApp:
    """Drives the welcome/select/result flow from user actions and location results."""

    def __init__(
        self,
        *,
        provider: LocationProvider,
        authorizer: PermissionAuthorizer,
        geocoder: ReverseGeocoder,
        flow: WonderFlow | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._provider = provider
        self._authorizer = authorizer
        self._geocoder = geocoder
        self._logger = logger or logging.getLogger("wonder_apps.app")
        self.flow = flow or WonderFlow()
        self._welcome_tasks = ScreenTasks("welcome", logger=self._logger)

    @property
    def state(self) -> AppState:
        return self.flow.state

    def request_start(self) -> asyncio.Task[None]:
        """Handle "Get Started": locate the user, then move to the selection screen."""
        if self.flow.closed:
            raise SessionClosedError("Cannot start: session already exited")
        if not isinstance(self.flow.state, Welcome):
            raise InvalidTransitionError(f"Cannot start from {type(self.flow.state).__name__}")
        return self._welcome_tasks.launch(self._locate, self._on_located, self._on_location_failed)

    async def start(self) -> AppState:
        self.request_start()
        await self._welcome_tasks.wait()
        return self.flow.state

    def choose(self, wonder: Landmark) -> Result:
        return self.flow.select(wonder)

    def restart(self) -> Select:
        return self.flow.restart()

    def exit(self) -> None:
        self._welcome_tasks.leave()
        self.flow.exit()

    def report(self) -> DistanceReport:
        state = self.flow.state
        if not isinstance(state, Result):
            raise InvalidTransitionError(f"No distance to report in {type(state).__name__}")
        return state.report()

    async def _locate(self) -> tuple[Coordinate, str]:
        location = await acquire_location(self._provider, self._authorizer)
        place_name = await asyncio.to_thread(describe_location, self._geocoder, location)
        return location, place_name

    def _on_located(self, located: tuple[Coordinate, str]) -> None:
        location, place_name = located
        self.flow.start(location, place_name)

    def _on_location_failed(self, exc: Exception) -> None:
        if isinstance(exc, LocationPermissionError):
            notice = PERMISSION_DENIED_NOTICE
        elif isinstance(exc, LocationError):
            notice = LOCATION_UNAVAILABLE_NOTICE
        else:
            self._logger.exception("location_acquisition_crashed", exc_info=exc)
            notice = LOCATION_UNAVAILABLE_NOTICE
        self._logger.warning("location_acquisition_failed", extra={"error": f"{type(exc).__name__}: {exc}"})
        self.flow.location_failed(notice)
