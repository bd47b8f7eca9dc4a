"""Wonder Distance and Joke Viewer terminal apps."""

__version__ = "0.1.0"
