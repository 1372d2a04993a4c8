"""Shared fixtures for the engine test suites."""
import os
import sys
from fractions import Fraction

import pytest

# Add the project root to the path so the suites run without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lintegral_core import MeasurableSpace, AtomicMeasure, TOP


@pytest.fixture
def abc_space():
    return MeasurableSpace(["a", "b", "c"])


@pytest.fixture
def counting(abc_space):
    return AtomicMeasure.counting(abc_space)


@pytest.fixture
def atomic_space():
    """Four points, with 1 and 2 glued into one atom."""
    return MeasurableSpace([1, 2, 3, 4], atoms=[[1, 2], [3], [4]])


@pytest.fixture
def weighted_space():
    return MeasurableSpace(["a", "b", "c", "d"])


@pytest.fixture
def weighted(weighted_space):
    return AtomicMeasure(weighted_space, {"a": 1, "b": 2, "c": TOP, "d": Fraction(1, 3)})
