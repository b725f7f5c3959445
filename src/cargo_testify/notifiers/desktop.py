#
# src/cargo_testify/notifiers/desktop.py
#
"""
Desktop notifiers that shell out to the platform's notification tool.
"""
import shutil
import subprocess

import structlog

from cargo_testify.exceptions import NotificationError
from cargo_testify.notifiers.base import APP_NAME, Notification, render
from cargo_testify.outcome import Outcome
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("notifiers.desktop")


class CommandNotifier:
    """Base for notifiers that deliver through one external executable."""

    executable: str = ""

    @classmethod
    def is_available(cls) -> bool:
        return shutil.which(cls.executable) is not None

    def build_command(self, notification: Notification) -> list[str]:
        raise NotImplementedError

    def notify(self, outcome: Outcome) -> None:
        notification = render(outcome)
        command = self.build_command(notification)
        notify_log = log.bind(notifier=type(self).__name__, title=notification.title)
        notify_log.debug("Sending notification", command=command[0])

        try:
            result = subprocess.run(command, capture_output=True, text=True, check=False)
        except OSError as e:
            notify_log.error("Notification command could not be started", error=str(e))
            raise NotificationError(f"Failed to run '{command[0]}': {e}", details=e) from e

        if result.returncode != 0:
            notify_log.error(
                "Notification command failed",
                exit_code=result.returncode,
                stderr=result.stderr.strip(),
            )
            raise NotificationError(
                f"'{command[0]}' exited with status {result.returncode}: {result.stderr.strip()}"
            )


class NotifySendNotifier(CommandNotifier):
    """freedesktop.org notifications via `notify-send`."""

    executable = "notify-send"

    def build_command(self, notification: Notification) -> list[str]:
        return [
            self.executable,
            f"--app-name={APP_NAME}",
            f"--icon={notification.icon}",
            f"--urgency={notification.urgency}",
            notification.title,
            notification.body,
        ]


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class OsaScriptNotifier(CommandNotifier):
    """macOS Notification Center via `osascript`."""

    executable = "osascript"

    def build_command(self, notification: Notification) -> list[str]:
        script = (
            f"display notification {_applescript_string(notification.body)}"
            f" with title {_applescript_string(APP_NAME)}"
            f" subtitle {_applescript_string(f'{notification.title} {notification.symbol}')}"
        )
        if notification.sound:
            script += f" sound name {_applescript_string(notification.sound)}"
        return [self.executable, "-e", script]

# 🔼⚙️
