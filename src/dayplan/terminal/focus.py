# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from dayplan.model.entity_id import TaskId
from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.service import task_list
from dayplan.service.focus_timer import FocusTimer, complete_selected, format_countdown
from dayplan.service.notifier import DesktopNotifier
from dayplan.service.session import PlannerSession
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.parse import parse_date, parse_position
from dayplan.terminal.runtime import run_in_session
from dayplan.time import DateKey

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()


def _timer_panel(task_label: str, remaining_seconds: int) -> Panel:
    body = Text(justify="center")
    body.append(f"{format_countdown(remaining_seconds)}\n", style="bold red")
    body.append(task_label)
    return Panel(body, title="Focus", border_style="red")


@app.command("start, s", no_args_is_help=True)
def start(
    position: Annotated[int, typer.Argument(parser=parse_position)],
    minutes: Annotated[
        Optional[int], typer.Option("--minutes", "-m", help="Session length")
    ] = None,
    seconds: Annotated[
        Optional[int],
        typer.Option("--seconds", "-s", help="Session length in seconds, for short tests"),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
) -> None:
    """Run a focus countdown on a task, then offer to mark it completed."""
    config = CONFIGURATION_REPO.get_config()
    if seconds is not None:
        duration_seconds = seconds
    else:
        duration_seconds = (minutes or config["default_focus_minutes"]) * 60

    async def operation(
        session: PlannerSession,
    ) -> Optional[tuple[DateKey, TaskId, str]]:
        task_list.select_task(session, position)
        task_id = task_list.get_task(session, position)["id"]
        timer = FocusTimer(
            session,
            DesktopNotifier(console, config["desktop_notifications"]),
        )
        label = timer.current_label()

        with Live(_timer_panel(label, duration_seconds), console=console) as live:
            timer.start(
                duration_seconds,
                on_tick=lambda remaining: live.update(_timer_panel(label, remaining)),
            )
            completed = await timer.wait()

        if not completed:
            return None
        return session.current_date, task_id, label

    finished = run_in_session(date, operation)
    if finished is None:
        return
    date_key, task_id, label = finished

    # Prompt outside the event loop, then complete in a fresh session
    if not typer.confirm("Mark this task as completed?"):
        return

    async def complete(session: PlannerSession) -> None:
        index = task_list.find_task(session.record, task_id)
        if index is None:
            console.print(f"[yellow]'{label}' is no longer on {date_key}[/yellow]")
            return
        task_list.select_task(session, index)
        await complete_selected(session)
        console.print(f"[green]Completed '{label}'[/green]")

    run_in_session(date_key, complete)
