#
# src/cargo_testify/monitor/events.py
#
"""
Event type passed from the filesystem watcher to the reactor.
"""
from pathlib import Path

from attrs import define, field


@define(frozen=True, slots=True)
class ChangeEvent:
    """A single filesystem change, stamped with the monotonic time it arrived."""

    path: Path | None = field()
    event_type: str = field(default="modified")
    received_at: float = field(default=0.0)

# 🔼⚙️
