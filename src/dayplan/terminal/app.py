# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from dayplan.terminal import (
    calendar,
    configuration,
    day,
    focus,
    notes,
    preference,
    task,
)
from dayplan.terminal.custom_typer import OrderedAliasedTyperGroup
from dayplan.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Dayplan - A daily planner in the CLI",
    no_args_is_help=True,
)
app.add_typer(day.app, name="day, d")
app.add_typer(task.app, name="task, t")
app.add_typer(notes.app, name="notes, n")
app.add_typer(calendar.app, name="calendar, c")
app.add_typer(focus.app, name="focus, f")
app.add_typer(preference.zoom_app, name="zoom, z")
app.add_typer(preference.theme_app, name="theme, th")
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    dark: Annotated[
        bool,
        typer.Option("--dark", help="Use the dark palette for this command only"),
    ] = False,
) -> None:
    """
    Dayplan - A daily planner in the CLI

    Global options that apply to all commands.
    """
    if dark:
        view_state.set_dark_mode(True)


def run() -> None:
    app()
