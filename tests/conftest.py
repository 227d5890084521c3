"""Shared fixtures for the densela test suite."""

import random

import pytest

from densela.matrix import DenseMatrix, mat
from densela.vector import vec


def pytest_configure(config: pytest.Config) -> None:
    # test_perf.py is deselected by the default addopts in pyproject.toml.
    config.addinivalue_line(
        "markers",
        "perf: wall-clock bounds on reduction of larger matrices (run with -m perf)",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> int:
    """Make the random-matrix tests reproducible.

    The echelon and ops tests draw entries with ``random.uniform`` and
    shuffle row orders with ``random.shuffle``; they request this fixture
    through ``indirect=True`` so each seed becomes its own test id.
    Without a parameter the seed is 0.

    Returns the seed so failing assertions can report it.
    """
    seed = getattr(request, "param", 0)
    random.seed(seed)
    return seed


@pytest.fixture
def grid() -> DenseMatrix:
    """6x6 matrix with ``M[r][c] = 10r + c``."""
    return mat(*[vec(*[10 * r + c for c in range(6)]) for r in range(6)])


@pytest.fixture
def grid_sub(grid: DenseMatrix):
    """3x4 view of ``grid`` at offset (2, 1)."""
    return grid.get_sub_matrix(2, 3, 1, 4)


@pytest.fixture
def example3() -> DenseMatrix:
    return mat(
        vec(0, 3, -6, 6, 4, -5),
        vec(3, -9, 12, -9, 6, 15),
        vec(3, -7, 8, -5, 8, 9),
    )
