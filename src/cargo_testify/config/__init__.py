#
# config/__init__.py
#
"""
Configuration handling sub-package for cargo-testify.

Exports the loading function and the configuration model.
"""

from .loader import load_config
from .models import DEFAULT_IGNORE_DURATION, Config

__all__ = [
    "DEFAULT_IGNORE_DURATION",
    "Config",
    "load_config",
]

# 🔼⚙️
