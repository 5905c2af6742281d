# conftest.py

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from chalkee import config


@pytest.fixture(autouse=True)
def color_enabled():
    """Start every test with color on and restore the previous flag after."""
    previous = config.is_color_enabled()
    config.set_global_color_enabled(True)
    yield
    config.set_global_color_enabled(previous)
