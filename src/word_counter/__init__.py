"""Word Counter: word frequency counting service for uploaded text files."""

from .version import __version__

__all__ = ["__version__"]
