# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from dayplan.service.session import PlannerSession
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.parse import parse_date
from dayplan.terminal.runtime import run_in_session
from dayplan.view.day import day_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show(
    date: Annotated[
        Optional[str],
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    offset: Annotated[
        int, typer.Option("--offset", "-o", help="Step this many days from the date")
    ] = 0,
) -> None:
    """Show the tasks and notes of a day."""

    async def operation(session: PlannerSession) -> None:
        if offset != 0:
            await session.navigate_day(offset)
        day_view(session.snapshot(), show_task_notes=True)

    run_in_session(date, operation)


@app.command("today, t")
def today() -> None:
    async def operation(session: PlannerSession) -> None:
        await session.go_to_today()
        day_view(session.snapshot(), show_task_notes=True)

    run_in_session(None, operation)
