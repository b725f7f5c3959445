# src/cargo_testify/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from cargo_testify.cli.utils import (
    config_from_options,
    logging_options,
    project_options,
    setup_logging_from_context,
)
from cargo_testify.exceptions import ConfigurationError
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting the resolved configuration."""
    pass


@config_cli.command(name="show", context_settings={"ignore_unknown_options": True})
@project_options
@logging_options
@click.pass_context
def show_config(
    ctx: click.Context,
    project_dir: Path | None,
    ignore_duration: int,
    command: str,
    notifier: str,
    no_echo: bool,
    cargo_test_args: tuple[str, ...],
    **kwargs,
):
    """Resolve, validate, and display the configuration."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )
    log.info("Executing 'config show' command")

    try:
        config = config_from_options(project_dir, ignore_duration, command, notifier, no_echo, cargo_test_args)
    except ConfigurationError as e:
        log.error("Failed to build configuration", error=str(e))
        click.echo(f"Error: Configuration problem:\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(config, expand_all=True))
    click.echo(f"Test command: {' '.join(config.test_command)}")

# 🔼⚙️
