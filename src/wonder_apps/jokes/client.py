"""HTTP client for the remote joke service."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from wonder_apps.models import Joke


class JokeSource(Protocol):
    """Anything that can produce one joke asynchronously."""

    async def fetch_random(self) -> Joke:
        """Return a joke or raise on network/parse failure."""


class JokeClient:
    """Fetches jokes from an official-joke-api compatible endpoint."""

    def __init__(
        self,
        base_url: str = "https://official-joke-api.appspot.com",
        *,
        timeout_seconds: float = 6.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._logger = logger or logging.getLogger("wonder_apps.jokes.client")

    async def fetch_random(self) -> Joke:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            transport=self._transport,
        ) as client:
            res = await client.get("/random_joke")
            res.raise_for_status()
            data = res.json()

        joke = Joke.from_payload(data)
        self._logger.info("joke_fetched", extra={"base_url": self._base_url})
        return joke
