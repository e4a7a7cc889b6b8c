"""Shared pytest fixtures for all tests."""

from typing import Generator

import pytest

from busy_indicator import BusyIndicatorManager, BusyIndicators


@pytest.fixture
def manager() -> BusyIndicatorManager:
    """Fresh, non-strict manager isolated from the module-level instance."""
    return BusyIndicatorManager()


@pytest.fixture(autouse=True)
def reset_default_manager() -> Generator[None, None, None]:
    """Reset the process-wide instance around each test."""
    BusyIndicators.configure()
    yield
    BusyIndicators.configure()
