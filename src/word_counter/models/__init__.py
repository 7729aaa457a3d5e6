"""Data models for Word Counter."""

from .word_count import WordCountResult

__all__ = ["WordCountResult"]
