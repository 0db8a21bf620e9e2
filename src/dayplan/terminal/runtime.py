# SPDX-License-Identifier: MIT

import asyncio
from typing import Any, Awaitable, Callable, Coroutine, Optional, TypeVar

import typer
from rich.console import Console

from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.repository.day_record import DAY_RECORD_REPO, StorageError
from dayplan.service.session import PlannerSession
from dayplan.service.task_list import TaskMoveError, TaskValidationError
from dayplan.time import DateKey

T = TypeVar("T")

console = Console()


def create_session(date_key: Optional[DateKey] = None) -> PlannerSession:
    config = CONFIGURATION_REPO.get_config()
    return PlannerSession(
        DAY_RECORD_REPO,
        current_date=date_key,
        week_start=config["week_start"],
        notes_debounce_ms=config["notes_debounce_ms"],
    )


def run_async(operation: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, turning planner errors into a red message and exit code 1."""
    try:
        return asyncio.run(operation)
    except TaskValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except TaskMoveError as e:
        console.print(f"[red]Failed to move task: {e}[/red]")
        raise typer.Exit(1)
    except StorageError as e:
        console.print(f"[red]Storage error: {e}[/red]")
        raise typer.Exit(1)
    except IndexError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def run_in_session(
    date_key: Optional[DateKey],
    operation: Callable[[PlannerSession], Awaitable[T]],
) -> T:
    async def runner() -> T:
        session = create_session(date_key)
        await session.open()
        try:
            return await operation(session)
        finally:
            # Persist any notes edit still waiting on its debounce timer
            await session.close()

    return run_async(runner())
