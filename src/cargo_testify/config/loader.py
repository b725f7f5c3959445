#
# config/loader.py
#
"""
Builds and validates the runtime Config from CLI and environment input.
"""

from collections.abc import Sequence
from datetime import timedelta
from pathlib import Path

import structlog

from cargo_testify.config.models import DEFAULT_COMMAND, Config
from cargo_testify.exceptions import ConfigurationError
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")

MANIFEST_FILE = "Cargo.toml"


def load_config(
    project_dir: Path | str | None = None,
    ignore_duration_ms: int = 300,
    extra_args: Sequence[str] = (),
    command: str = DEFAULT_COMMAND,
    echo_output: bool = True,
    notifier: str = "auto",
) -> Config:
    """
    Resolves the project directory and returns a validated Config.

    Args:
        project_dir: Root of the project to watch. Defaults to the current directory.
        ignore_duration_ms: Debounce window in milliseconds.
        extra_args: Arguments forwarded to the test command after `test`.
        command: The program that runs the test suite.
        echo_output: Whether to mirror the test command's output live.
        notifier: Name of the notifier backend.

    Raises:
        ConfigurationError: If the directory is unusable or a value is invalid.
    """
    raw_dir = Path(project_dir) if project_dir is not None else Path.cwd()
    load_log = log.bind(project_dir=str(raw_dir))

    try:
        resolved_dir = raw_dir.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        load_log.error("Project directory cannot be resolved", error=str(e))
        raise ConfigurationError(f"Project directory does not exist: '{raw_dir}'", details=e) from e

    if not resolved_dir.is_dir():
        load_log.error("Project path is not a directory")
        raise ConfigurationError(f"Project path is not a directory: '{resolved_dir}'")

    if not (resolved_dir / MANIFEST_FILE).is_file():
        load_log.warning(
            "No manifest found in project directory; is this a cargo project?",
            manifest=MANIFEST_FILE,
        )

    try:
        config = Config(
            project_dir=resolved_dir,
            ignore_duration=timedelta(milliseconds=ignore_duration_ms),
            extra_args=tuple(extra_args),
            command=command,
            echo_output=echo_output,
            notifier=notifier,
        )
    except (TypeError, ValueError) as e:
        load_log.error("Invalid configuration value", error=str(e))
        raise ConfigurationError(f"Invalid configuration: {e}", details=e) from e

    load_log.debug("Configuration built", config=repr(config))
    return config

# 🔼⚙️
