#
# src/cargo_testify/monitor/service.py
#
"""
Wraps a watchdog Observer and feeds its events into an asyncio queue.
"""
import asyncio
import time
from collections.abc import Callable
from pathlib import Path

import structlog
from watchdog.events import (
    EVENT_TYPE_CLOSED_NO_WRITE,
    EVENT_TYPE_OPENED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from cargo_testify.exceptions import MonitoringSetupError, WatchError
from cargo_testify.monitor.events import ChangeEvent
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("monitor.service")

# How often a waiting consumer checks that the observer thread is still alive.
HEALTH_CHECK_INTERVAL = 1.0

ACCESS_ONLY_EVENT_TYPES = frozenset({EVENT_TYPE_OPENED, EVENT_TYPE_CLOSED_NO_WRITE})


class ChangeEventHandler(FileSystemEventHandler):
    """Translates watchdog events into ChangeEvents on the event loop's queue."""

    def __init__(
        self,
        event_queue: asyncio.Queue[ChangeEvent],
        loop: asyncio.AbstractEventLoop,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self._queue = event_queue
        self._loop = loop
        self._clock = clock

    def on_any_event(self, event: FileSystemEvent) -> None:
        # Reads of watched files, including the test command's own, are not changes.
        if event.event_type in ACCESS_ONLY_EVENT_TYPES:
            return

        # Moves are relevant at their destination.
        raw_path = getattr(event, "dest_path", "") or event.src_path
        if isinstance(raw_path, bytes):
            raw_path = raw_path.decode("utf-8", errors="surrogateescape")
        path = Path(raw_path) if raw_path else None

        change = ChangeEvent(path=path, event_type=event.event_type, received_at=self._clock())
        self._loop.call_soon_threadsafe(self._queue.put_nowait, change)


class MonitoringService:
    """Owns the watchdog observer for one project root."""

    def __init__(self, event_queue: asyncio.Queue[ChangeEvent] | None = None):
        self.event_queue: asyncio.Queue[ChangeEvent] = event_queue or asyncio.Queue()
        self._observer: Observer | None = None

    @property
    def is_running(self) -> bool:
        return self._observer is not None and self._observer.is_alive()

    def subscribe(self, root: Path, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """
        Starts recursive change notifications under `root`.

        Raises:
            MonitoringSetupError: If the directory cannot be watched.
        """
        if not root.is_dir():
            raise MonitoringSetupError("Watch root is not a directory", path=root)

        loop = loop or asyncio.get_running_loop()
        handler = ChangeEventHandler(self.event_queue, loop)
        observer = Observer()
        try:
            observer.schedule(handler, str(root), recursive=True)
            observer.start()
        except OSError as e:
            log.error("Failed to start filesystem observer", path=str(root), error=str(e))
            raise MonitoringSetupError("Failed to start filesystem observer", path=root, details=e) from e

        self._observer = observer
        log.info("Watching project directory", path=str(root), emoji_key="watch")

    async def next_event(self) -> ChangeEvent:
        """
        Waits for the next change event.

        Raises:
            WatchError: If the observer stopped delivering events.
        """
        while True:
            if not self.is_running and self.event_queue.empty():
                log.error("Filesystem observer is no longer running")
                raise WatchError("Filesystem observer stopped unexpectedly")
            try:
                return await asyncio.wait_for(self.event_queue.get(), timeout=HEALTH_CHECK_INTERVAL)
            except TimeoutError:
                continue

    async def stop(self) -> None:
        if self._observer is None:
            return
        observer, self._observer = self._observer, None
        observer.stop()
        await asyncio.to_thread(observer.join)
        log.debug("Filesystem observer stopped.")

# 🔼⚙️
