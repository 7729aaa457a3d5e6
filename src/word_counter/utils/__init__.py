"""Utility helpers for Word Counter."""
