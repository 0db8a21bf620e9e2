# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import typer
from rich.console import Console
from rich.table import Table

from dayplan import configuration
from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _config_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (platform default)",
    )
    table.add_row("week_start", config["week_start"])
    table.add_row("notes_debounce_ms", str(config["notes_debounce_ms"]))
    table.add_row("zoom_debounce_ms", str(config["zoom_debounce_ms"]))
    table.add_row("min_zoom", str(config["min_zoom"]))
    table.add_row("max_zoom", str(config["max_zoom"]))
    table.add_row("default_focus_minutes", str(config["default_focus_minutes"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("desktop_notifications", _enabled(config["desktop_notifications"]))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_config_table(CONFIGURATION_REPO.get_config()))
    console.print(f"Days directory: {configuration.DATA_DAYS_DIR}")

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing day files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path", help="Reset data path to the platform default"
        ),
    ] = False,
    week_start: Annotated[
        Optional[str],
        typer.Option(
            "--week-start",
            click_type=click.Choice(["sunday", "monday"]),
            help="First day of the calendar week",
        ),
    ] = None,
    notes_debounce_ms: Annotated[
        Optional[int],
        typer.Option("--notes-debounce-ms", min=0, help="Quiet time before notes save"),
    ] = None,
    zoom_debounce_ms: Annotated[
        Optional[int],
        typer.Option("--zoom-debounce-ms", min=0, help="Quiet time before zoom saves"),
    ] = None,
    min_zoom: Annotated[
        Optional[float], typer.Option("--min-zoom", min=0.1)
    ] = None,
    max_zoom: Annotated[
        Optional[float], typer.Option("--max-zoom", min=0.1)
    ] = None,
    default_focus_minutes: Annotated[
        Optional[int],
        typer.Option("--default-focus-minutes", min=1, help="Focus timer length"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            click_type=click.Choice(LOG_LEVELS, case_sensitive=False),
        ),
    ] = None,
    desktop_notifications: Annotated[
        Optional[bool],
        typer.Option(
            "--desktop-notifications/--no-desktop-notifications",
            help="Enable/disable desktop notifications when a focus timer ends",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    config = CONFIGURATION_REPO.get_config()
    new_min = min_zoom if min_zoom is not None else config["min_zoom"]
    new_max = max_zoom if max_zoom is not None else config["max_zoom"]
    if new_min > new_max:
        raise typer.BadParameter("min_zoom cannot be greater than max_zoom")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        week_start=week_start,  # type: ignore[arg-type]
        notes_debounce_ms=notes_debounce_ms,
        zoom_debounce_ms=zoom_debounce_ms,
        min_zoom=min_zoom,
        max_zoom=max_zoom,
        default_focus_minutes=default_focus_minutes,
        log_level=log_level.upper() if log_level is not None else None,
        desktop_notifications=desktop_notifications,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _config_table(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
    )
