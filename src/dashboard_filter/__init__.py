"""Text matching helpers for the dev server dashboard's app filter."""

from .matching import matches, normalize

__all__ = ["matches", "normalize"]
