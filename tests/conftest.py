"""Pytest configuration and fixtures for isocontours tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def block_values():
    """10x11 field: 3x5 block of 1.0 (cols 3..5, rows 3..7) in 0.0."""
    values = np.zeros((11, 10))
    values[3:8, 3:6] = 1.0
    return values


@pytest.fixture
def hollow_block_values():
    """Same block with a 1x3 hole of 0.0 in its middle column."""
    values = np.zeros((11, 10))
    values[3:8, 3:6] = 1.0
    values[4:7, 4] = 0.0
    return values


@pytest.fixture
def terraced_values():
    """7x7 field: plateau of 1.0 (cols/rows 1..5) with a 2.0 peak at (3, 3)."""
    values = np.zeros((7, 7))
    values[1:6, 1:6] = 1.0
    values[3, 3] = 2.0
    return values
