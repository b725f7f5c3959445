# src/cargo_testify/cli/utils.py

import logging
from pathlib import Path

import click
import structlog

from cargo_testify.config import Config, load_config
from cargo_testify.notifiers.factory import AUTO, NOTIFIER_MAP
from cargo_testify.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)
NOTIFIER_CHOICES = click.Choice([AUTO, *NOTIFIER_MAP.keys()], case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="TESTIFY_LOG_LEVEL",
        help="Set the logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="TESTIFY_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="TESTIFY_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def project_options(f):
    """Decorator adding the options and trailing arguments that build a Config."""
    f = click.argument("cargo_test_args", nargs=-1, type=click.UNPROCESSED)(f)
    f = click.option(
        "--no-echo",
        "no_echo",
        is_flag=True,
        default=False,
        help="Do not mirror the test command's output to the terminal.",
    )(f)
    f = click.option(
        "-n",
        "--notifier",
        type=NOTIFIER_CHOICES,
        default=AUTO,
        show_default=True,
        envvar="TESTIFY_NOTIFIER",
        show_envvar=True,
        help="How to show the outcome of each run.",
    )(f)
    f = click.option(
        "--command",
        default="cargo",
        show_default=True,
        envvar="TESTIFY_COMMAND",
        show_envvar=True,
        help="Program invoked as `<command> test [ARGS]`.",
    )(f)
    f = click.option(
        "-i",
        "--ignore-duration",
        type=click.IntRange(min=0),
        default=300,
        show_default=True,
        envvar="TESTIFY_IGNORE_DURATION",
        show_envvar=True,
        help="Milliseconds after a run starts during which changes are ignored.",
    )(f)
    f = click.option(
        "-p",
        "--project-dir",
        type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
        default=None,
        envvar="TESTIFY_PROJECT_DIR",
        show_envvar=True,
        help="Project root to watch. Defaults to the current directory.",
    )(f)
    return f


def config_from_options(
    project_dir: Path | None,
    ignore_duration: int,
    command: str,
    notifier: str,
    no_echo: bool,
    cargo_test_args: tuple[str, ...],
) -> Config:
    """Builds the runtime Config from the values of `project_options`."""
    return load_config(
        project_dir=project_dir,
        ignore_duration_ms=ignore_duration,
        extra_args=cargo_test_args,
        command=command,
        echo_output=not no_echo,
        notifier=notifier.lower(),
    )


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.
    """
    log_level_str = local_log_level or ctx.obj.get("LOG_LEVEL") or default_log_level
    log_file_path = local_log_file or ctx.obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else ctx.obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
        log_level_str = "WARNING"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )

# ⚙️🛠️
