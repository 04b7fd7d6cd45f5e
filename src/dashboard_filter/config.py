"""Pydantic configuration models."""

from __future__ import annotations

from pydantic import BaseModel


class FilterConfig(BaseModel):
    """Which app fields the filter box searches besides the app name."""

    search_aliases: bool = True
    search_description: bool = False
    search_services: bool = True
