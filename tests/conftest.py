"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def noisy_line(rng):
    """Points scattered around y = 1.5x - 4."""
    n = 200
    x = rng.uniform(-10.0, 10.0, n)
    y = 1.5 * x - 4.0 + rng.standard_normal(n) * 0.5
    return x, y


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a CSV file under tmp_path and return its Path."""
    def _write(*lines, name="data.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write


@pytest.fixture
def abc_csv(write_csv):
    """Three-column table from the reference example."""
    return write_csv("a,b,c", "1,2,3", "4,5,6")
