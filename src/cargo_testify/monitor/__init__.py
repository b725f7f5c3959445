#
# src/cargo_testify/monitor/__init__.py
#
"""
Filesystem monitoring sub-package for cargo-testify.
"""
from .events import ChangeEvent
from .service import ChangeEventHandler, MonitoringService

__all__ = [
    "ChangeEvent",
    "ChangeEventHandler",
    "MonitoringService",
]

# 🔼⚙️
