"""Pytest fixtures for estimator tests."""

import pytest

from core.models import EstimatorInput


@pytest.fixture
def default_input() -> EstimatorInput:
    """Documented defaults: 555 m2 x 9 floors, 65 workers, 8 h/day."""
    return EstimatorInput()
