# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from dayplan.service import reorder as reorder_service
from dayplan.service import task_list
from dayplan.service.session import PlannerSession
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.parse import parse_date, parse_position
from dayplan.terminal.runtime import run_in_session
from dayplan.view.day import day_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"

DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
]


def show(session: PlannerSession) -> None:
    day_view(session.snapshot(), session.selected_index())


@app.command("add, a", no_args_is_help=True)
def add(text: str, date: DateOption = None) -> None:
    async def operation(session: PlannerSession) -> None:
        task = await task_list.create_task(session, text)
        if task is None:
            console.print("[yellow]Nothing to add, task text is empty[/yellow]")
            return
        show(session)

    run_in_session(date, operation)


@app.command("list, ls")
def list_tasks(
    date: DateOption = None,
    notes: Annotated[
        bool, typer.Option("--notes", "-n", help="Show the notes of each task")
    ] = False,
) -> None:
    async def operation(session: PlannerSession) -> None:
        day_view(session.snapshot(), show_task_notes=notes)

    run_in_session(date, operation)


@app.command("done, x", no_args_is_help=True)
def done(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    date: DateOption = None,
) -> None:
    """Toggle the completion of a task."""

    async def operation(session: PlannerSession) -> None:
        await task_list.toggle_completed(session, position)
        show(session)

    run_in_session(date, operation)


@app.command("edit, e", no_args_is_help=True)
def edit(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    text: Annotated[Optional[str], typer.Option("--text", "-t")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    remove_notes: Annotated[bool, typer.Option("--remove-notes", "-rn")] = False,
    date: DateOption = None,
) -> None:
    async def operation(session: PlannerSession) -> None:
        task = task_list.get_task(session, position)
        new_text = text if text is not None else task["text"]
        new_notes = notes if notes is not None else task["notes"]
        if remove_notes:
            new_notes = ""
        await task_list.edit_task(session, position, new_text, new_notes)
        day_view(session.snapshot(), show_task_notes=True)

    run_in_session(date, operation)


@app.command("delete, rm", no_args_is_help=True)
def delete(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    date: DateOption = None,
) -> None:
    async def operation(session: PlannerSession) -> None:
        task = await task_list.delete_task(session, position)
        console.print(f"[green]Deleted '{task['text']}'[/green]")
        show(session)

    run_in_session(date, operation)


@app.command("move, mv", no_args_is_help=True)
def move(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    to: Annotated[
        str, typer.Option("--to", "-to", parser=parse_date, help=DATE_HELP)
    ],
    date: DateOption = None,
) -> None:
    """Move a task to another date; it arrives there not completed."""

    async def operation(session: PlannerSession) -> None:
        task_id = task_list.get_task(session, position)["id"]
        moved = await task_list.move_to_date(
            session, task_id, session.current_date, to
        )
        console.print(f"[green]Moved '{moved['text']}' to {to}[/green]")
        show(session)

    run_in_session(date, operation)


@app.command("next-day, nd", no_args_is_help=True)
def next_day(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    date: DateOption = None,
) -> None:
    async def operation(session: PlannerSession) -> None:
        moved = await task_list.move_to_next_day(session, position)
        console.print(f"[green]Moved '{moved['text']}' to the next day[/green]")
        show(session)

    run_in_session(date, operation)


@app.command("reorder, r", no_args_is_help=True)
def reorder(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    onto: Annotated[
        Optional[int],
        typer.Option(
            "--onto", "-o", parser=parse_position, help="Drop onto this position"
        ),
    ] = None,
    below: Annotated[
        bool,
        typer.Option("--below", "-b", help="With --onto, drop below instead of above"),
    ] = False,
    top: Annotated[bool, typer.Option("--top", help="Move to the top")] = False,
    bottom: Annotated[bool, typer.Option("--bottom", help="Move to the bottom")] = False,
    date: DateOption = None,
) -> None:
    if [onto is not None, top, bottom].count(True) != 1:
        raise typer.BadParameter("Use exactly one of --onto, --top or --bottom")

    async def operation(session: PlannerSession) -> None:
        if onto is not None:
            moved = await reorder_service.drop_on_task(
                session, position, onto, drop_above=not below
            )
        else:
            moved = await reorder_service.drop_on_zone(
                session, position, "top" if top else "bottom"
            )
        if not moved:
            console.print("[yellow]Task is already in that position[/yellow]")
        show(session)

    run_in_session(date, operation)
