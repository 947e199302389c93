"""Root pytest configuration for all tests.

Provides shared fixtures for the UBID test suites. Import paths
(``src`` and the project root) are configured in pyproject.toml.
"""

from __future__ import annotations

import re

import pytest

from domain.ubid.grammar import compile_pattern
from domain.ubid.value_objects import GridCell

# Open Location Code grammar constants, duplicated here so domain tests do
# not depend on the infrastructure adapter.
OLC_ALPHABET = "23456789CFGHJMPQRVWX"
OLC_SEPARATOR = "+"


@pytest.fixture
def unit_cell() -> GridCell:
    """Cell 1 degree tall and 2 degrees wide with its south-west corner at the origin."""
    return GridCell(
        north_latitude=1.0,
        south_latitude=0.0,
        east_longitude=2.0,
        west_longitude=0.0,
        latitude_center=0.5,
        longitude_center=1.0,
        code_length=10,
    )


@pytest.fixture
def olc_pattern() -> re.Pattern[str]:
    """UBID pattern over the Open Location Code alphabet."""
    return compile_pattern(OLC_ALPHABET, OLC_SEPARATOR)


@pytest.fixture
def olc_grid():
    """Real Open Location Code adapter."""
    from infrastructure.olc import OpenLocationCodeAdapter

    return OpenLocationCodeAdapter()
