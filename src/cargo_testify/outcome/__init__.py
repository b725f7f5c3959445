#
# src/cargo_testify/outcome/__init__.py
#
"""
Outcome classification sub-package for cargo-testify.
"""
from .classifier import classify, classify_result
from .formats import CARGO_TEST_V1, DEFAULT_FORMAT, OutputFormat
from .models import CompileError, Outcome, TestsFailed, TestsPassed

__all__ = [
    "CARGO_TEST_V1",
    "DEFAULT_FORMAT",
    "CompileError",
    "Outcome",
    "OutputFormat",
    "TestsFailed",
    "TestsPassed",
    "classify",
    "classify_result",
]

# 🔼⚙️
