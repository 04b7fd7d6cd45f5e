"""Separator-insensitive text matching for the dashboard filter box."""

from __future__ import annotations

_SEPARATORS = str.maketrans("", "", "-_ ")


def normalize(text: str) -> str:
    """Normalize text for comparison: lowercase, then drop hyphens, underscores and spaces."""
    return text.lower().translate(_SEPARATORS)


def matches(candidate: str, normalized_query: str) -> bool:
    """Return True if ``normalized_query`` is found within normalized ``candidate``.

    The query is expected to come from :func:`normalize` already, so a list of
    candidates can be checked against a single normalization of it. An empty
    query matches everything.
    """
    if not normalized_query:
        return True
    return normalized_query in normalize(candidate)
