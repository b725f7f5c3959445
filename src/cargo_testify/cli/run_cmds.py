# src/cargo_testify/cli/run_cmds.py

import asyncio
import logging
import sys
from pathlib import Path

import click
import structlog

from cargo_testify.cli.utils import (
    config_from_options,
    logging_options,
    project_options,
    setup_logging_from_context,
)
from cargo_testify.exceptions import ConfigurationError, TestifyError
from cargo_testify.runtime import Reactor
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")


def _run_reactor(reactor: Reactor) -> int:
    """
    Runs the reactor until it fails or the user interrupts it.

    Returns the process exit code.
    """
    try:
        asyncio.run(reactor.start())
        return 0
    except KeyboardInterrupt:
        log.warning("Shutdown initiated by KeyboardInterrupt (CTRL-C).")
        return 130
    except TestifyError as e:
        log.critical("Fatal error, stopping.", error=str(e), error_type=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        return 1
    except Exception as e:
        log.critical("Reactor exited with an unhandled exception.", exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        return 1
    finally:
        logging.shutdown()


@click.command(
    name="run",
    context_settings={"ignore_unknown_options": True},
)
@project_options
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    project_dir: Path | None,
    ignore_duration: int,
    command: str,
    notifier: str,
    no_echo: bool,
    cargo_test_args: tuple[str, ...],
    **kwargs,
):
    """Watch the project and run its tests on every change.

    Any ARGS are passed on to `cargo test`, e.g. `cargo testify -- --release`.
    """
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )

    try:
        config = config_from_options(project_dir, ignore_duration, command, notifier, no_echo, cargo_test_args)
        reactor = Reactor(config)
    except ConfigurationError as e:
        log.error("Failed to build configuration", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    log.info("Initializing watch...", project_dir=str(config.project_dir))

    exit_code = _run_reactor(reactor)

    if exit_code != 0:
        sys.exit(exit_code)

# 🔼⚙️
