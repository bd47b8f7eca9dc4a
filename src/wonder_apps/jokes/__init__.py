"""Joke viewer feature."""

from .client import JokeClient, JokeSource
from .screen import JokeScreen, load_joke

__all__ = ["JokeClient", "JokeScreen", "JokeSource", "load_joke"]
