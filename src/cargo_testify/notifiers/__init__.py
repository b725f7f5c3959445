#
# src/cargo_testify/notifiers/__init__.py
#
"""
Notification backends for cargo-testify.
"""
from .base import Notification, Notifier, render
from .console import ConsoleNotifier
from .desktop import NotifySendNotifier, OsaScriptNotifier
from .factory import get_notifier

__all__ = [
    "ConsoleNotifier",
    "Notification",
    "Notifier",
    "NotifySendNotifier",
    "OsaScriptNotifier",
    "get_notifier",
    "render",
]

# 🔼⚙️
