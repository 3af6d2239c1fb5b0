"""
Root conftest.py - puts the project root on sys.path and provides shared fixtures.
"""
import logging
import os
import sys

import numpy as np
import pytest

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def rng():
    """Seeded generator so random-color tests are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture
def chromodels_debug(caplog):
    """Capture DEBUG records from every chromodels logger."""
    with caplog.at_level(logging.DEBUG, logger="chromodels"):
        yield caplog
