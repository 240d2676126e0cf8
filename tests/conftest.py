"""Shared pytest configuration and fixtures for tests."""

import io
import sys
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gamify.core.config import Settings  # noqa: E402
from gamify.core.service import GamifyService  # noqa: E402


class FakeClock:
    """Callable date source that tests can move forward."""

    def __init__(self, today: date = date(2026, 3, 1)):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(clock):
    """Fresh service with default rewards and a controllable clock."""
    return GamifyService(Settings(daily_reset="midnight"), clock=clock)


@pytest.fixture
def console():
    """Rich console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), record=True, width=100, color_system=None)
