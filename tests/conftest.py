"""Shared test fixtures for nblab tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def count_rows() -> np.ndarray:
    """Five count-like rows: c1 rows sit around 1-2, c2 rows around 4-5."""
    return np.array([
        [1.0, 2.0, 2.0, 1.0, 2.0],
        [1.0, 2.0, 1.0, 1.0, 2.0],
        [4.0, 5.0, 5.0, 4.0, 4.0],
        [5.0, 4.0, 5.0, 5.0, 5.0],
        [1.0, 2.0, 2.0, 1.0, 2.0],
    ])


@pytest.fixture
def count_labels() -> list[str]:
    return ["c1", "c1", "c2", "c2", "c1"]


@pytest.fixture
def continuous_rows() -> np.ndarray:
    return np.array([[1.0, 2.0], [2.0, 2.0], [2.0, 3.0], [3.0, 3.0]])


@pytest.fixture
def continuous_labels() -> list[str]:
    return ["c1", "c2", "c1", "c2"]
