from __future__ import annotations

import asyncio

import pytest

from wonder_apps.tasks import ScreenTasks


def test_result_delivered_while_screen_is_active() -> None:
    async def _run() -> list[str]:
        delivered: list[str] = []
        tasks = ScreenTasks("demo")

        async def work() -> str:
            return "done"

        tasks.launch(work, delivered.append)
        await tasks.wait()
        return delivered

    assert asyncio.run(_run()) == ["done"]


def test_leaving_screen_cancels_and_drops_result() -> None:
    async def _run() -> tuple[list[str], bool, bool]:
        delivered: list[str] = []
        tasks = ScreenTasks("demo")
        release = asyncio.Event()

        async def work() -> str:
            await release.wait()
            return "late"

        task = tasks.launch(work, delivered.append)
        await asyncio.sleep(0)
        tasks.leave()
        release.set()
        await tasks.wait()
        return delivered, task.cancelled(), tasks.active

    delivered, cancelled, active = asyncio.run(_run())
    assert delivered == []
    assert cancelled is True
    assert active is False


def test_relaunch_supersedes_previous_task() -> None:
    async def _run() -> tuple[list[str], int]:
        delivered: list[str] = []
        tasks = ScreenTasks("demo")

        async def slow() -> str:
            await asyncio.sleep(10)
            return "first"

        async def fast() -> str:
            return "second"

        tasks.launch(slow, delivered.append)
        tasks.launch(fast, delivered.append)
        await tasks.wait()
        return delivered, tasks.generation

    delivered, generation = asyncio.run(_run())
    assert delivered == ["second"]
    assert generation == 2


def test_result_from_older_generation_is_dropped() -> None:
    # Work that swallows cancellation still must not reach the screen.
    async def _run() -> list[str]:
        delivered: list[str] = []
        tasks = ScreenTasks("demo")
        started = asyncio.Event()

        async def stubborn() -> str:
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                pass
            return "stale"

        task = tasks.launch(stubborn, delivered.append)
        await started.wait()
        tasks.leave()
        await task
        return delivered

    assert asyncio.run(_run()) == []


def test_errors_go_to_error_callback() -> None:
    async def _run() -> list[Exception]:
        errors: list[Exception] = []
        tasks = ScreenTasks("demo")

        async def broken() -> str:
            raise RuntimeError("boom")

        tasks.launch(broken, lambda _: None, errors.append)
        await tasks.wait()
        return errors

    errors = asyncio.run(_run())
    assert len(errors) == 1
    assert str(errors[0]) == "boom"


def test_errors_without_callback_propagate() -> None:
    async def _run() -> None:
        tasks = ScreenTasks("demo")

        async def broken() -> str:
            raise RuntimeError("boom")

        tasks.launch(broken, lambda _: None)
        await tasks.wait()

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(_run())


def test_pending_tracks_the_running_task() -> None:
    async def _run() -> tuple[bool, bool, bool]:
        tasks = ScreenTasks("demo")
        release = asyncio.Event()

        async def work() -> str:
            await release.wait()
            return "done"

        before = tasks.pending
        tasks.launch(work, lambda _: None)
        during = tasks.pending
        release.set()
        await tasks.wait()
        return before, during, tasks.pending

    assert asyncio.run(_run()) == (False, True, False)
