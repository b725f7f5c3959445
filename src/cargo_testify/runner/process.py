#
# src/cargo_testify/runner/process.py
#
"""
Runs the project's test command in a subprocess using asyncio.subprocess.
"""
import asyncio
from functools import partial

import click
import structlog

from cargo_testify.config import Config
from cargo_testify.exceptions import CaptureError, SpawnError
from cargo_testify.runner.capture import StreamCapturer
from cargo_testify.runner.protocols import RunResult, TestRunner
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runner.process")


class ProcessRunner(TestRunner):
    """
    Implements the TestRunner protocol by executing the test command in a subprocess.

    Both pipes are drained by their own task while the child runs, so neither
    can fill up and stall the child.
    """
    async def run(self, config: Config) -> RunResult:
        """
        Executes `config.test_command` in the project directory and captures its output.

        Raises:
            SpawnError: If the command cannot be started.
            CaptureError: If either output stream breaks mid-run.
        """
        command = config.test_command
        runner_log = log.bind(
            command=" ".join(command),
            working_dir=str(config.project_dir),
        )
        runner_log.info("Executing test command", emoji_key="run")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=config.project_dir,
            )
        except FileNotFoundError as e:
            runner_log.error("Test command not found", command_executable=command[0])
            raise SpawnError(
                f"Test command not found: '{command[0]}'. Is it installed and in the system's PATH?",
                command=command,
                details=e,
            ) from e
        except OSError as e:
            runner_log.error("Failed to spawn test command", error=str(e))
            raise SpawnError(f"Failed to spawn '{' '.join(command)}': {e}", command=command, details=e) from e

        stdout_echo = partial(click.echo, err=False) if config.echo_output else None
        stderr_echo = partial(click.echo, err=True) if config.echo_output else None
        stdout_capture = asyncio.create_task(
            StreamCapturer(process.stdout, "stdout", stdout_echo).capture()
        )
        stderr_capture = asyncio.create_task(
            StreamCapturer(process.stderr, "stderr", stderr_echo).capture()
        )

        try:
            stdout, stderr, exit_code = await asyncio.gather(
                stdout_capture, stderr_capture, process.wait()
            )
        except CaptureError:
            runner_log.error("Output capture failed, terminating test command", pid=process.pid)
            stdout_capture.cancel()
            stderr_capture.cancel()
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        success = exit_code == 0
        runner_log.info(
            "Test command finished",
            exit_code=exit_code,
            success=success,
        )
        runner_log.debug(
            "Test command output",
            stdout_len=len(stdout),
            stderr_len=len(stderr),
        )

        return RunResult(
            success=success,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )

# 🔼⚙️
