# src/cargo_testify/exceptions.py

"""
Exception hierarchy for cargo-testify.

Every error that ends the watch loop derives from TestifyError so the CLI can
report it in one place.
"""

from pathlib import Path


class TestifyError(Exception):
    """Base class for all cargo-testify errors."""

    __test__ = False  # not a pytest test class

    def __init__(self, message: str, details: Exception | None = None):
        self.details = details
        super().__init__(message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ConfigurationError(TestifyError):
    """Raised when the runtime configuration cannot be built."""

    pass


class MonitoringSetupError(TestifyError):
    """Raised when the filesystem watch cannot be established."""

    def __init__(self, message: str, path: Path | None = None, details: Exception | None = None):
        self.path = path
        full_message = message
        if path:
            full_message += f" (Path: '{path}')"
        super().__init__(full_message, details)


class WatchError(TestifyError):
    """Raised when the stream of filesystem events breaks down."""

    pass


class SpawnError(TestifyError):
    """Raised when the test command cannot be started."""

    def __init__(self, message: str, command: list[str] | None = None, details: Exception | None = None):
        self.command = command or []
        super().__init__(message, details)


class CaptureError(TestifyError):
    """Raised when reading the output of the test command fails mid-stream."""

    def __init__(self, message: str, stream_name: str, details: Exception | None = None):
        self.stream_name = stream_name
        super().__init__(f"[{stream_name}] {message}", details)


class ClassificationError(TestifyError):
    """Raised when the test output matches none of the known output patterns."""

    def __init__(self, message: str, format_version: str | None = None):
        self.format_version = format_version
        if format_version:
            message += f" (output format: {format_version})"
        super().__init__(message)


class NotificationError(TestifyError):
    """Raised when a notifier backend fails to deliver a notification."""

    pass

# 🔼⚙️
