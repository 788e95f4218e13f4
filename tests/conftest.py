"""
Shared fixtures. Test doubles live in helpers.py.
"""

import pytest


@pytest.fixture
def fixed_clock():
    return lambda: 1_700_000_000.0
