# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from dayplan.service.session import PlannerSession
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.parse import parse_date
from dayplan.terminal.runtime import run_in_session

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]


def _print_notes(session: PlannerSession) -> None:
    notes = session.record["notes"]
    if not notes.strip():
        console.print("[grey50]No notes for this day[/grey50]")
        return
    console.print(Panel(notes, title=f"Notes {session.current_date}"))


@app.command("show, s")
def show(date: DateOption = None) -> None:
    async def operation(session: PlannerSession) -> None:
        _print_notes(session)

    run_in_session(date, operation)


@app.command("set", no_args_is_help=True)
def set_notes(text: str, date: DateOption = None) -> None:
    """Replace the notes of a day."""

    async def operation(session: PlannerSession) -> None:
        session.update_notes(text)
        _print_notes(session)

    run_in_session(date, operation)


@app.command("append, a", no_args_is_help=True)
def append(
    lines: Annotated[list[str], typer.Argument(help="Each value becomes one line")],
    date: DateOption = None,
) -> None:
    """Add lines to the end of a day's notes."""

    async def operation(session: PlannerSession) -> None:
        for line in lines:
            notes = session.record["notes"]
            separator = "\n" if notes and not notes.endswith("\n") else ""
            # Each line is one edit; the debounce coalesces them into one save
            session.update_notes(f"{notes}{separator}{line}")
        _print_notes(session)

    run_in_session(date, operation)


@app.command("clear")
def clear(date: DateOption = None) -> None:
    async def operation(session: PlannerSession) -> None:
        session.update_notes("")
        _print_notes(session)

    run_in_session(date, operation)
