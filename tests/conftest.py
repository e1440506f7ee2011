"""Shared pytest configuration — adds project root to sys.path."""
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `from majority.xxx import` and
# `from scripts.xxx import` work regardless of where pytest is invoked from.
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from majority.config import Settings  # noqa: E402


@pytest.fixture
def small_settings() -> Settings:
    """Settings small enough for the full benchmark to finish instantly."""
    return Settings(
        seed=7,
        value_range=100,
        majority_size=1000,
        start_size=100,
        max_size=1000,
        growth=2,
        quadratic_max_size=400,
    )
