"""Busy Indicator.

Track whether named tasks are in progress without ad-hoc flag variables::

    from busy_indicator import BusyIndicators

    BusyIndicators.set("upload")
    BusyIndicators.get("upload")  # True
"""

from .errors import BusyIndicatorError, UnregisteredKeyError
from .registry import BusyIndicatorManager, BusyIndicatorOptions, BusyIndicators

__all__ = [
    "BusyIndicatorError",
    "BusyIndicatorManager",
    "BusyIndicatorOptions",
    "BusyIndicators",
    "UnregisteredKeyError",
]
