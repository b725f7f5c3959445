#
# config/models.py
#
"""
Attrs-based data model for the cargo-testify runtime configuration.
"""

from datetime import timedelta
from pathlib import Path
from typing import Any

from attrs import define, field

DEFAULT_IGNORE_DURATION = timedelta(milliseconds=300)
DEFAULT_COMMAND = "cargo"
TEST_SUBCOMMAND = "test"


def _validate_non_negative_duration(inst: Any, attr: Any, value: timedelta) -> None:
    """Validator ensures a duration is not negative."""
    if not isinstance(value, timedelta) or value < timedelta(0):
        raise ValueError(f"Field '{attr.name}' must be a non-negative timedelta, got {value!r}")


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"Field '{attr.name}' must not be empty")


@define(frozen=True, slots=True)
class Config:
    """Immutable settings for one watched project, built once at startup."""

    project_dir: Path = field(converter=Path)
    ignore_duration: timedelta = field(
        default=DEFAULT_IGNORE_DURATION, validator=_validate_non_negative_duration
    )
    extra_args: tuple[str, ...] = field(default=(), converter=tuple)
    command: str = field(default=DEFAULT_COMMAND, validator=_validate_non_empty)
    echo_output: bool = field(default=True)
    notifier: str = field(default="auto")

    @property
    def test_command(self) -> list[str]:
        """The full argv of one test run: `<command> test <extra args...>`."""
        return [self.command, TEST_SUBCOMMAND, *self.extra_args]

# 🔼⚙️
