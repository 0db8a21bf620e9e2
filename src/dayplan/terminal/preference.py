# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from dayplan.repository.configuration import CONFIGURATION_REPO
from dayplan.repository.preference import PREFERENCE_REPO
from dayplan.service.zoom import ZoomController
from dayplan.terminal.custom_typer import AliasedTyperGroup
from dayplan.terminal.runtime import run_async
from dayplan.view import state as view_state

zoom_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
theme_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

TimesOption = Annotated[
    int, typer.Option("--times", "-n", min=1, help="Repeat the step this many times")
]


def _zoom_controller() -> ZoomController:
    config = CONFIGURATION_REPO.get_config()
    return ZoomController(
        PREFERENCE_REPO,
        min_zoom=config["min_zoom"],
        max_zoom=config["max_zoom"],
        debounce_ms=config["zoom_debounce_ms"],
    )


def _print_zoom(controller: ZoomController) -> None:
    console.print(f"Zoom: [bold]{controller.percent()}%[/bold]")


@zoom_app.command("show, s")
def show_zoom() -> None:
    _print_zoom(_zoom_controller())


@zoom_app.command("in, i")
def zoom_in(times: TimesOption = 1) -> None:
    async def operation() -> None:
        controller = _zoom_controller()
        for _ in range(times):
            controller.zoom_in()
        await controller.channel.close()
        _print_zoom(controller)

    run_async(operation())


@zoom_app.command("out, o")
def zoom_out(times: TimesOption = 1) -> None:
    async def operation() -> None:
        controller = _zoom_controller()
        for _ in range(times):
            controller.zoom_out()
        await controller.channel.close()
        _print_zoom(controller)

    run_async(operation())


@zoom_app.command("reset, r")
def zoom_reset() -> None:
    async def operation() -> None:
        controller = _zoom_controller()
        await controller.reset()
        _print_zoom(controller)

    run_async(operation())


def _set_dark_mode(dark_mode: bool) -> None:
    PREFERENCE_REPO.update_preferences(dark_mode=dark_mode)
    view_state.set_dark_mode(dark_mode)
    console.print(f"Theme: [bold]{'dark' if dark_mode else 'light'}[/bold]")


@theme_app.command("dark")
def dark() -> None:
    _set_dark_mode(True)


@theme_app.command("light")
def light() -> None:
    _set_dark_mode(False)


@theme_app.command("toggle, t")
def toggle() -> None:
    _set_dark_mode(not PREFERENCE_REPO.get_preferences()["dark_mode"])
