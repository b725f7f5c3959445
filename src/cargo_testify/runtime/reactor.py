# src/cargo_testify/runtime/reactor.py
"""
Consumes filesystem events, debounces them, and triggers test runs.
"""
import asyncio
import time
from collections.abc import Callable
from enum import Enum, auto
from pathlib import PurePath

import structlog

from cargo_testify.config import Config
from cargo_testify.exceptions import NotificationError
from cargo_testify.monitor import ChangeEvent, MonitoringService
from cargo_testify.notifiers import Notifier, get_notifier
from cargo_testify.outcome import (
    DEFAULT_FORMAT,
    CompileError,
    Outcome,
    OutputFormat,
    TestsFailed,
    TestsPassed,
    classify_result,
)
from cargo_testify.runner import ProcessRunner, TestRunner
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.reactor")

# Project artifacts, relative to the project root, whose changes trigger a run.
WATCHED_PATHS: tuple[str, ...] = (
    "src",
    "tests",
    "Cargo.toml",
    "Cargo.lock",
    "build.rs",
)


class ReactorStatus(Enum):
    """Operational state of the reactor loop."""

    IDLE = auto()  # Waiting for the next event.
    RUNNING = auto()  # Test run in progress; new events wait in the queue.


def filter_allows(project_dir: PurePath, path: PurePath) -> bool:
    """Should a change at `path` trigger running the test suite?"""
    for watched in WATCHED_PATHS:
        watched_path = project_dir / watched
        if path == watched_path or watched_path in path.parents:
            return True
    return False


class Reactor:
    """Runs the tests once on start, then again for every relevant change."""

    def __init__(
        self,
        config: Config,
        runner: TestRunner | None = None,
        notifier: Notifier | None = None,
        monitor: MonitoringService | None = None,
        output_format: OutputFormat = DEFAULT_FORMAT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.runner = runner or ProcessRunner()
        self.notifier = notifier or get_notifier(config.notifier)
        self.monitor = monitor or MonitoringService()
        self.output_format = output_format
        self._clock = clock
        self.status = ReactorStatus.IDLE
        self.last_run_at: float | None = None
        log.debug(
            "Reactor initialized.",
            runner=type(self.runner).__name__,
            notifier=type(self.notifier).__name__,
        )

    async def start(self) -> None:
        """
        Subscribes to changes, runs the tests once, then reacts to events forever.

        Returns only by raising: fatal errors (watch failure, spawn failure,
        unclassifiable output) propagate to the caller.
        """
        self.monitor.subscribe(self.config.project_dir)
        try:
            await self.run_tests()
            log.info("Awaiting changes...", project_dir=str(self.config.project_dir), emoji_key="watch")
            while True:
                event = await self.monitor.next_event()
                await self.handle_event(event)
        finally:
            await self.monitor.stop()

    async def handle_event(self, event: ChangeEvent) -> bool:
        """Runs the tests if `event` calls for it. Returns whether a run happened."""
        if not self.should_react(event):
            return False
        log.info("Change detected", path=str(event.path), event_type=event.event_type, emoji_key="path")
        await self.run_tests()
        return True

    def should_react(self, event: ChangeEvent) -> bool:
        if event.path is None:
            log.debug("Ignoring event without a path", event_type=event.event_type)
            return False

        if not filter_allows(self.config.project_dir, event.path):
            log.debug("Ignoring change outside watched paths", path=str(event.path))
            return False

        # Events from the same save, or queued while the last run was in
        # progress, fall inside the window measured from that run's start.
        if self.last_run_at is not None:
            elapsed = event.received_at - self.last_run_at
            if elapsed < self.config.ignore_duration.total_seconds():
                log.debug("Ignoring change within cooldown", path=str(event.path), elapsed=round(elapsed, 3))
                return False

        return True

    async def run_tests(self) -> Outcome:
        """Performs one full run: execute, classify, notify."""
        started_at = self._clock()
        self.status = ReactorStatus.RUNNING
        try:
            result = await self.runner.run(self.config)
            outcome = classify_result(result, self.output_format)
            log.info(outcome.title, detail=outcome.detail, emoji_key=_OUTCOME_EMOJI_KEYS[type(outcome)])
            await self._notify(outcome)
        finally:
            self.status = ReactorStatus.IDLE
            self.last_run_at = started_at
        return outcome

    async def _notify(self, outcome: Outcome) -> None:
        try:
            await asyncio.to_thread(self.notifier.notify, outcome)
        except NotificationError as e:
            log.warning("Failed to deliver notification", error=str(e))


_OUTCOME_EMOJI_KEYS = {
    TestsPassed: "passed",
    TestsFailed: "failed",
    CompileError: "compile",
}

# 🔼⚙️
