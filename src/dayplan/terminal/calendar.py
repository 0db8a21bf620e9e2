# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.service import task_list
from dayplan.service.session import PlannerSession
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.parse import parse_date
from dayplan.terminal.runtime import run_in_session
from dayplan.view.calendar import calendar_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _show(session: PlannerSession) -> None:
    calendar_view(
        session.calendar.month,
        session.calendar_counts(),
        session.current_date,
        CONFIGURATION_REPO.get_config()["week_start"],
    )


@app.command("show, s")
def show(
    date: Annotated[
        Optional[str], typer.Argument(parser=parse_date, help=DATE_HELP)
    ] = None,
    months: Annotated[
        int,
        typer.Option(
            "--months", "-m", help="Show the month this many months away instead"
        ),
    ] = 0,
) -> None:
    """Show the month grid with completion badges."""

    async def operation(session: PlannerSession) -> None:
        if months != 0:
            await session.calendar.navigate_month(months)
        _show(session)

    run_in_session(date, operation)


@app.command("add, a", no_args_is_help=True)
def add(
    date: Annotated[str, typer.Argument(parser=parse_date, help=DATE_HELP)],
    text: str,
) -> None:
    """Add a task to any day straight from the calendar."""

    async def operation(session: PlannerSession) -> None:
        task = await task_list.add_to_date(session, date, text)
        if task is None:
            console.print("[yellow]Nothing to add, task text is empty[/yellow]")
            return
        console.print(f"[green]Added '{task['text']}' to {date}[/green]")
        _show(session)

    run_in_session(date, operation)
