#
# src/cargo_testify/runner/__init__.py
#
"""
Test execution sub-package for cargo-testify.
"""
from .capture import StreamCapturer
from .process import ProcessRunner
from .protocols import RunResult, TestRunner

__all__ = [
    "ProcessRunner",
    "RunResult",
    "StreamCapturer",
    "TestRunner",
]

# 🔼⚙️
