"""Busy indicator exceptions module.

This module exposes the errors raised by the busy indicator registry.
"""

from .errors import (
    BusyIndicatorError,
    UnregisteredKeyError,
)

__all__ = ["BusyIndicatorError", "UnregisteredKeyError"]
