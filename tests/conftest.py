"""Shared test fixtures for distconv tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def sample_values() -> np.ndarray:
    """Finite distances spanning several orders of magnitude, both signs."""
    rng = np.random.default_rng(42)
    magnitudes = 10.0 ** rng.uniform(-6, 6, size=50)
    signs = rng.choice([-1.0, 1.0], size=50)
    return np.concatenate([[0.0, 1.0, -1.0, 0.5, 1e-300, 1e300], magnitudes * signs])
