"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pathtracer.core.random import RandomSource  # noqa: E402
from pathtracer.core.vector import Vector3  # noqa: E402


@pytest.fixture
def rng():
    """Provide a seeded random source so every test is reproducible."""
    return RandomSource(12345)


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-6):
    assert abs(actual.x - expected.x) < tol, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"{actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"{actual} != {expected}"
