"""Busy indicator registry.

In-process registry of named busy flags for logical tasks.
"""

from .manager import BusyIndicatorManager, BusyIndicators
from .options import BusyIndicatorOptions

__all__ = [
    "BusyIndicatorManager",
    "BusyIndicatorOptions",
    "BusyIndicators",
]
