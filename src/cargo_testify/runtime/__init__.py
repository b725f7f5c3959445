# src/cargo_testify/runtime/__init__.py
"""
Runtime control loop for cargo-testify.
"""
from .reactor import WATCHED_PATHS, Reactor, ReactorStatus, filter_allows

__all__ = [
    "WATCHED_PATHS",
    "Reactor",
    "ReactorStatus",
    "filter_allows",
]
