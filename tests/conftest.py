"""
Shared fixtures for the test suite.

Module-level input grids live in _grids.py; this file only provides the
seeded random source for the noise tests.
"""

import random

import pytest

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def rng() -> random.Random:
    """Seeded random source: identical draws on every run."""
    return random.Random(1234)
