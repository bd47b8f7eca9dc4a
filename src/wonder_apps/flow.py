"""Screen flow for the Wonder Distance app: welcome -> select -> result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .geo import DistanceReport
from .landmarks import is_catalog_wonder
from .models import Coordinate, Landmark
from .telemetry import Telemetry


class FlowError(RuntimeError):
    """Base error for rejected screen transitions."""


class InvalidTransitionError(FlowError):
    """Raised when an event is not accepted in the current state."""


class SessionClosedError(FlowError):
    """Raised for any event received after the session exited."""


@dataclass(frozen=True, slots=True)
class Welcome:
    notice: str | None = None


@dataclass(frozen=True, slots=True)
class Select:
    user_location: Coordinate
    place_name: str


@dataclass(frozen=True, slots=True)
class Result:
    user_location: Coordinate
    wonder: Landmark
    place_name: str

    def report(self) -> DistanceReport:
        return DistanceReport.between(self.user_location, self.wonder)


@dataclass(frozen=True, slots=True)
class Exited:
    pass


AppState = Union[Welcome, Select, Result, Exited]


class WonderFlow:
    """Single state container; the state only changes through the transition methods."""

    def __init__(self, *, telemetry: Telemetry | None = None, logger: logging.Logger | None = None) -> None:
        self._state: AppState = Welcome()
        self._telemetry = telemetry
        self._logger = logger or logging.getLogger("wonder_apps.flow")

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def closed(self) -> bool:
        return isinstance(self._state, Exited)

    def start(self, location: Coordinate, place_name: str) -> Select:
        self._require(Welcome, "start")
        if not isinstance(location, Coordinate):
            raise InvalidTransitionError(f"Cannot start without a valid Coordinate, got {location!r}")
        return self._move(Select(user_location=location, place_name=place_name))

    def location_failed(self, reason: str) -> Welcome:
        self._require(Welcome, "location_failed")
        return self._move(Welcome(notice=reason))

    def select(self, wonder: Landmark) -> Result:
        current = self._require(Select, "select")
        if not is_catalog_wonder(wonder):
            raise InvalidTransitionError(f"Unknown wonder: {wonder.name!r}")
        return self._move(
            Result(user_location=current.user_location, wonder=wonder, place_name=current.place_name)
        )

    def restart(self) -> Select:
        current = self._require(Result, "restart")
        return self._move(Select(user_location=current.user_location, place_name=current.place_name))

    def exit(self) -> Exited:
        if self.closed:
            raise SessionClosedError("Session already exited")
        return self._move(Exited())

    def _require(self, expected: type, event: str):
        if self.closed:
            raise SessionClosedError(f"Cannot {event}: session already exited")
        if not isinstance(self._state, expected):
            raise InvalidTransitionError(
                f"Cannot {event} from {type(self._state).__name__}; expected {expected.__name__}"
            )
        return self._state

    def _move(self, new_state):
        previous = type(self._state).__name__
        self._state = new_state
        payload = {"from": previous, "to": type(new_state).__name__}
        self._logger.info("flow_transition", extra=payload)
        if self._telemetry is not None:
            self._telemetry.emit("flow_transition", payload)
        return new_state
