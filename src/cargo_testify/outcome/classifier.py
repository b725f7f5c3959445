#
# src/cargo_testify/outcome/classifier.py
#
"""
Turns the raw (success, stdout, stderr) of a test run into an Outcome.
"""

import structlog

from cargo_testify.exceptions import ClassificationError
from cargo_testify.outcome.formats import DEFAULT_FORMAT, OutputFormat
from cargo_testify.outcome.models import CompileError, Outcome, TestsFailed, TestsPassed
from cargo_testify.runner.protocols import RunResult
from cargo_testify.telemetry import StructLogger

log: StructLogger = structlog.get_logger("outcome.classifier")


def classify(
    process_success: bool,
    stdout: str,
    stderr: str,
    output_format: OutputFormat = DEFAULT_FORMAT,
) -> Outcome:
    """
    Classifies a finished test run by the first recognised line of its output.

    A successful run must carry a summary line on stdout. A failed run is a
    test failure when stdout carries a summary line, otherwise a compile error
    when stderr carries a compiler diagnostic.

    Raises:
        ClassificationError: If no pattern required for the exit status matches.
    """
    summary = output_format.find_summary(stdout)

    if process_success:
        if summary is None:
            log.error("Successful run without a summary line", format=output_format.version)
            raise ClassificationError(
                "Test command succeeded but printed no test summary line",
                format_version=output_format.version,
            )
        log.debug("Classified run", outcome="TestsPassed", detail=summary)
        return TestsPassed(summary)

    if summary is not None:
        log.debug("Classified run", outcome="TestsFailed", detail=summary)
        return TestsFailed(summary)

    error = output_format.find_error(stderr)
    if error is not None:
        log.debug("Classified run", outcome="CompileError", detail=error)
        return CompileError(error)

    log.error("Failed run without a summary line or compiler error", format=output_format.version)
    raise ClassificationError(
        "Test command failed but printed neither a test summary nor a compiler error",
        format_version=output_format.version,
    )


def classify_result(result: RunResult, output_format: OutputFormat = DEFAULT_FORMAT) -> Outcome:
    return classify(result.success, result.stdout, result.stderr, output_format)

# 🔼⚙️
