#
# src/cargo_testify/__init__.py
#
"""
cargo-testify: automatically run a Rust project's tests and notify about the result.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cargo-testify")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = ["__version__"]

# 🔼⚙️
