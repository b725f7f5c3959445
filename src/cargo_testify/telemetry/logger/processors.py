# src/cargo_testify/telemetry/logger/processors.py

"""
Custom structlog processors.
"""

import logging
from typing import Any

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS: dict[Any, str] = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "watch": "👀",
    "run": "🧪",
    "passed": "✅",
    "failed": "🚫",
    "compile": "🛠️",
    "path": "📁",
    "time": "⏱️",
    "general": "➡️",
}

# Keys that only matter while processors run and should not reach the renderer.
_INTERNAL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event message with an emoji for its level or explicit `emoji_key`."""
    emoji_key = event_dict.get("emoji_key")
    if emoji_key is not None:
        emoji = LOG_EMOJIS.get(emoji_key, LOG_EMOJIS["general"])
    else:
        level = logging.getLevelName(str(event_dict.get("level", method_name)).upper())
        emoji = LOG_EMOJIS.get(level, "")

    event = event_dict.get("event")
    if emoji and isinstance(event, str) and not event.startswith(emoji):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key in _INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
