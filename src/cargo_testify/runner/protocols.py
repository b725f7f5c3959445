#
# src/cargo_testify/runner/protocols.py
#
"""
Defines protocols and data structures for test execution.
"""
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from attrs import define

if TYPE_CHECKING:
    from cargo_testify.config import Config


@define(frozen=True, slots=True)
class RunResult:
    """
    Structured result of one finished test command execution.
    """
    success: bool
    exit_code: int
    stdout: str
    stderr: str


@runtime_checkable
class TestRunner(Protocol):
    """
    Protocol for a runner that executes a project's test suite once.
    """

    __test__ = False

    async def run(self, config: "Config") -> RunResult:
        """
        Runs the configured test command in the project directory.

        Args:
            config: The runtime configuration naming the command and project.

        Returns:
            A RunResult holding the exit status and the complete output.
        """
        ...

# 🔼⚙️
