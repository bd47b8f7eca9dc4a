"""Per-screen asynchronous work that never delivers results to a screen the user left."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")


class ScreenTasks:
    """Runs at most one task per screen and tags each launch with a generation.

    Launching again or leaving the screen cancels the running task and bumps the
    generation, so completions from an older launch are dropped instead of applied.
    """

    def __init__(self, screen: str, *, logger: logging.Logger | None = None) -> None:
        self._screen = screen
        self._generation = 0
        self._active = False
        self._task: asyncio.Task[None] | None = None
        self._logger = logger or logging.getLogger("wonder_apps.tasks")

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def launch(
        self,
        work: Callable[[], Awaitable[T]],
        on_result: Callable[[T], Any],
        on_error: Callable[[Exception], Any] | None = None,
    ) -> asyncio.Task[None]:
        """Start ``work()`` as the screen's only in-flight task."""
        self._cancel_running()
        self._generation += 1
        self._active = True
        generation = self._generation

        async def _run() -> None:
            try:
                result = await work()
            except Exception as exc:
                if not self._is_current(generation):
                    self._logger.info("stale_error_dropped", extra={"screen": self._screen, "generation": generation})
                    return
                if on_error is None:
                    raise
                on_error(exc)
                return

            if not self._is_current(generation):
                self._logger.info("stale_result_dropped", extra={"screen": self._screen, "generation": generation})
                return
            on_result(result)

        self._task = asyncio.create_task(_run(), name=f"{self._screen}-task-{generation}")
        self._logger.debug("screen_task_launched", extra={"screen": self._screen, "generation": generation})
        return self._task

    def leave(self) -> None:
        """Mark the screen inactive and cancel whatever it is still waiting on."""
        self._active = False
        self._cancel_running()
        self._generation += 1

    async def wait(self) -> None:
        """Wait for the current task, treating cancellation as completion."""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    def _cancel_running(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            self._logger.info("screen_task_cancelled", extra={"screen": self._screen, "generation": self._generation})
