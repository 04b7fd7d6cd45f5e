"""Click CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .apps import MULTI_SERVICE, AppStatus, StatusFileError, filter_apps, load_statuses
from .config import FilterConfig
from .matching import matches, normalize

console = Console()

_STATUS_STYLES = {"running": "green", "idle": "bright_black"}


@click.group()
def cli() -> None:
    """Dashboard filter: separator-insensitive matching for app lists."""


@cli.command("normalize")
@click.argument("text")
def normalize_cmd(text: str) -> None:
    """Print the canonical search form of TEXT."""
    console.print(normalize(text), markup=False, highlight=False, soft_wrap=True)


@cli.command("match")
@click.argument("candidate")
@click.argument("query")
@click.option("--raw-query", is_flag=True, help="Treat QUERY as already normalized.")
def match_cmd(candidate: str, query: str, raw_query: bool) -> None:
    """Check whether QUERY matches CANDIDATE. Exits 1 on no match."""
    normalized_query = query if raw_query else normalize(query)
    if matches(candidate, normalized_query):
        console.print("[green]match[/]")
    else:
        console.print("[yellow]no match[/]")
        raise SystemExit(1)


@cli.command("filter")
@click.argument("status_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("query", default="")
@click.option("--aliases/--no-aliases", default=True, help="Search app aliases.")
@click.option("--description/--no-description", default=False, help="Search app descriptions.")
@click.option("--services/--no-services", default=True, help="Search service names.")
@click.option("--json", "as_json", is_flag=True, help="Print matching app names as JSON.")
def filter_cmd(
    status_file: str,
    query: str,
    aliases: bool,
    description: bool,
    services: bool,
    as_json: bool,
) -> None:
    """Filter the apps in STATUS_FILE by QUERY."""
    config = FilterConfig(
        search_aliases=aliases,
        search_description=description,
        search_services=services,
    )
    try:
        apps = load_statuses(Path(status_file))
    except StatusFileError as e:
        raise click.ClickException(str(e))

    found = filter_apps(apps, query, config)

    if as_json:
        click.echo(json.dumps([app.name for app in found]))
        return

    if not found:
        console.print(f"[yellow]No apps match {escape(query)!r}.[/]")
        return

    console.print(_build_table(found))


def _status_cell(status: str) -> str:
    # partial multi-service status such as "1/3"
    style = _STATUS_STYLES.get(status, "yellow")
    return f"[{style}]{status}[/]"


def _build_table(apps: list[AppStatus]) -> Table:
    table = Table(title="Apps")
    table.add_column("App", style="bold cyan")
    table.add_column("Status")
    table.add_column("URL")

    for app in apps:
        table.add_row(escape(app.display_name), _status_cell(app.status), escape(app.url))
        if app.type == MULTI_SERVICE:
            for i, svc in enumerate(app.services):
                prefix = "└─" if i == len(app.services) - 1 else "├─"
                svc_status = "running" if svc.running else "idle"
                table.add_row(f"  {prefix} {escape(svc.name)}", _status_cell(svc_status), escape(svc.url))

    return table
