"""State holder for the joke screen."""

from __future__ import annotations

import asyncio
import logging

from wonder_apps.models import FALLBACK_JOKE, Joke
from wonder_apps.tasks import ScreenTasks

from .client import JokeSource


class JokeScreen:
    """Loads one joke per visit and falls back to a fixed joke on any failure."""

    def __init__(self, source: JokeSource, *, logger: logging.Logger | None = None) -> None:
        self._source = source
        self._logger = logger or logging.getLogger("wonder_apps.jokes.screen")
        self._tasks = ScreenTasks("joke", logger=self._logger)
        self.loading = True
        self.joke: Joke | None = None

    @property
    def active(self) -> bool:
        return self._tasks.active

    def enter(self) -> asyncio.Task[None]:
        """Start the single fetch for this visit."""
        self.loading = True
        self.joke = None
        return self._tasks.launch(self._source.fetch_random, self._show, self._show_fallback)

    def leave(self) -> None:
        self._tasks.leave()

    async def wait(self) -> None:
        await self._tasks.wait()

    def _show(self, joke: Joke) -> None:
        self.joke = joke
        self.loading = False

    def _show_fallback(self, exc: Exception) -> None:
        self._logger.warning("joke_fetch_failed", extra={"error": f"{type(exc).__name__}: {exc}"})
        self.joke = FALLBACK_JOKE
        self.loading = False


async def load_joke(source: JokeSource) -> Joke:
    """Run one visit of the joke screen to completion and return what it shows."""
    screen = JokeScreen(source)
    screen.enter()
    await screen.wait()
    return screen.joke or FALLBACK_JOKE
