# SPDX-License-Identifier: MIT

from typing import Protocol

from plyer import notification
from rich.console import Console

from dayplan.configuration import APP_NAME


class Notifier(Protocol):
    def notify_timer_complete(self, task_label: str) -> None: ...

    def request_foreground(self) -> None: ...


class DesktopNotifier:
    def __init__(self, console: Console, desktop_notifications: bool = True) -> None:
        self.console = console
        self.desktop_notifications = desktop_notifications

    def notify_timer_complete(self, task_label: str) -> None:
        self.console.print(
            f"[bold red]Focus session complete:[/bold red] {task_label}"
        )
        if self.desktop_notifications:
            notification.notify(
                title="Focus session complete",
                message=f"Time for a break! You worked on: {task_label}",
                app_name=APP_NAME,
                timeout=10,
            )

    def request_foreground(self) -> None:
        # A terminal cannot raise its own window; ring the bell instead
        self.console.bell()
