#
# src/cargo_testify/notifiers/base.py
#
"""
Protocol and presentation shared by all notifier backends.
"""
from typing import Protocol, assert_never, runtime_checkable

from attrs import define

from cargo_testify.outcome import CompileError, Outcome, TestsFailed, TestsPassed

APP_NAME = "cargo-testify"


@define(frozen=True, slots=True)
class Notification:
    """Everything a backend needs to display one outcome."""

    title: str
    body: str
    icon: str
    symbol: str
    urgency: str = "normal"
    sound: str | None = None
    is_success: bool = False


def render(outcome: Outcome) -> Notification:
    """Maps an outcome onto its notification presentation."""
    match outcome:
        case TestsPassed(detail=detail):
            return Notification(
                title=outcome.title,
                body=detail,
                icon="face-angel",
                symbol="🔵",
                is_success=True,
            )
        case TestsFailed(detail=detail):
            return Notification(
                title=outcome.title,
                body=detail,
                icon="face-angry",
                symbol="🔴",
                urgency="critical",
                sound="Basso",
            )
        case CompileError(detail=detail):
            return Notification(
                title=outcome.title,
                body=detail,
                icon="face-angry",
                symbol="🔴",
                urgency="critical",
            )
        case _:
            assert_never(outcome)


@runtime_checkable
class Notifier(Protocol):
    """Displays the outcome of a test run to the developer."""

    def notify(self, outcome: Outcome) -> None:
        """
        Shows a notification for `outcome`.

        Raises:
            NotificationError: If the backend could not deliver the notification.
        """
        ...

# 🔼⚙️
