#
# src/cargo_testify/notifiers/console.py
#
"""
Fallback notifier that prints a styled panel to the terminal.
"""
from rich.console import Console
from rich.panel import Panel

from cargo_testify.notifiers.base import render
from cargo_testify.outcome import Outcome


class ConsoleNotifier:
    """Prints each outcome as a rich panel on stderr."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    @classmethod
    def is_available(cls) -> bool:
        return True

    def notify(self, outcome: Outcome) -> None:
        notification = render(outcome)
        style = "green" if notification.is_success else "red"
        self.console.print(
            Panel(
                notification.body,
                title=f"{notification.symbol} {notification.title}",
                border_style=style,
                expand=False,
            )
        )

# 🔼⚙️
