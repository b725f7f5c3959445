# src/cargo_testify/telemetry/__init__.py

"""
Logging setup for cargo-testify.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]
