"""Version information for Word Counter."""

__version__ = "1.0.0"
