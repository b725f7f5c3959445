# src/cargo_testify/cli/main.py

"""
Main CLI entry point for cargo-testify using Click.
Handles global options like logging level.
"""

import click
import structlog

from cargo_testify import __version__
from cargo_testify.cli.config_cmds import config_cli
from cargo_testify.cli.run_cmds import run_cli
from cargo_testify.cli.utils import logging_options, setup_logging_from_context
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="cargo-testify")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    cargo-testify: run `cargo test` on every change and notify about the result.

    Options can also be given as TESTIFY_* environment variables.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx)
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(config_cli)
cli.add_command(run_cli)
# cargo runs `cargo-testify testify [ARGS]` for `cargo testify [ARGS]`.
cli.add_command(run_cli, name="testify")

if __name__ == "__main__":
    cli()

# 🖥️⚙️
