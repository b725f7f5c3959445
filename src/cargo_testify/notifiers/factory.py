#
# src/cargo_testify/notifiers/factory.py
#
"""
Factory for creating Notifier instances.
"""
import sys

import structlog

from cargo_testify.exceptions import ConfigurationError
from cargo_testify.notifiers.base import Notifier
from cargo_testify.notifiers.console import ConsoleNotifier
from cargo_testify.notifiers.desktop import NotifySendNotifier, OsaScriptNotifier
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("notifiers.factory")

NOTIFIER_MAP = {
    "notify-send": NotifySendNotifier,
    "osascript": OsaScriptNotifier,
    "console": ConsoleNotifier,
}

AUTO = "auto"


def _auto_candidates(platform: str) -> list[type]:
    if platform == "darwin":
        return [OsaScriptNotifier, ConsoleNotifier]
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return [NotifySendNotifier, ConsoleNotifier]
    return [ConsoleNotifier]


def get_notifier(notifier_name: str = AUTO, platform: str | None = None) -> Notifier:
    """
    Factory function to get an instance of a Notifier.

    `auto` picks the first backend usable on the current platform and falls
    back to printing on the console.
    """
    notifier_key = notifier_name.lower()

    if notifier_key == AUTO:
        platform = platform or sys.platform
        for candidate in _auto_candidates(platform):
            if candidate.is_available():
                log.debug("Selected notifier automatically", notifier=candidate.__name__, platform=platform)
                return candidate()
        return ConsoleNotifier()

    notifier_class = NOTIFIER_MAP.get(notifier_key)
    if not notifier_class:
        log.error("Unsupported notifier specified", notifier=notifier_name)
        raise ConfigurationError(
            f"Unsupported notifier: '{notifier_name}'. "
            f"Available notifiers: {[AUTO, *NOTIFIER_MAP.keys()]}"
        )

    if not notifier_class.is_available():
        log.warning("Notifier executable not found on PATH", notifier=notifier_name)

    log.debug("Instantiating notifier", notifier=notifier_name)
    return notifier_class()

# 🔼⚙️
