#
# src/cargo_testify/outcome/models.py
#
"""
The closed set of outcomes a test run can be classified as.
"""

from typing import ClassVar, TypeAlias

from attrs import define


@define(frozen=True, slots=True)
class TestsPassed:
    """The suite compiled and every test passed."""

    __test__: ClassVar[bool] = False
    title: ClassVar[str] = "Tests passed"

    detail: str


@define(frozen=True, slots=True)
class TestsFailed:
    """The suite compiled but at least one test failed."""

    __test__: ClassVar[bool] = False
    title: ClassVar[str] = "Tests failed"

    detail: str


@define(frozen=True, slots=True)
class CompileError:
    """The suite never reached the test phase."""

    title: ClassVar[str] = "Compilation error"

    detail: str


Outcome: TypeAlias = TestsPassed | TestsFailed | CompileError

# 🔼⚙️
