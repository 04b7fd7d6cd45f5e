"""App status records and the dashboard list filter."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .config import FilterConfig
from .matching import matches, normalize

MULTI_SERVICE = "multi-service"


class StatusFileError(ValueError):
    """Raised when a status file cannot be read as a list of app statuses."""


class ServiceStatus(BaseModel):
    """One service inside a multi-service app."""

    name: str
    running: bool = False
    port: int | None = None
    uptime: str | None = None
    url: str = ""
    default: bool = False


class AppStatus(BaseModel):
    """One row of the dashboard, as served by the status endpoint."""

    name: str
    type: str = ""
    url: str = ""
    aliases: list[str] = []
    description: str = ""
    running: bool = False
    port: int | None = None
    uptime: str | None = None
    services: list[ServiceStatus] = []

    @property
    def status(self) -> str:
        if self.type != MULTI_SERVICE:
            return "running" if self.running else "idle"
        running = sum(1 for s in self.services if s.running)
        if running == 0:
            return "idle"
        if running == len(self.services):
            return "running"
        return f"{running}/{len(self.services)}"

    @property
    def display_name(self) -> str:
        if self.aliases:
            return f"{self.name} ({', '.join(self.aliases)})"
        return self.name


def searchable_fields(app: AppStatus, config: FilterConfig) -> list[str]:
    """Return the strings the filter checks for one app."""
    fields = [app.name]
    if config.search_aliases:
        fields.extend(app.aliases)
    if config.search_description and app.description:
        fields.append(app.description)
    if config.search_services:
        fields.extend(s.name for s in app.services)
    return fields


def filter_apps(
    apps: list[AppStatus],
    query: str,
    config: FilterConfig | None = None,
) -> list[AppStatus]:
    """Return the apps matching ``query``, in their original order."""
    config = config or FilterConfig()
    normalized_query = normalize(query)
    if not normalized_query:
        return list(apps)
    return [
        app for app in apps
        if any(matches(field, normalized_query) for field in searchable_fields(app, config))
    ]


def load_statuses(path: Path) -> list[AppStatus]:
    """Load a JSON array of app statuses from ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StatusFileError(f"{path}: cannot read status file ({e})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StatusFileError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise StatusFileError(f"{path}: expected a JSON array of apps, got {type(data).__name__}")

    apps = []
    for i, entry in enumerate(data):
        try:
            apps.append(AppStatus.model_validate(entry))
        except ValidationError as e:
            raise StatusFileError(f"{path}: invalid app entry at index {i}: {e}") from e
    return apps
