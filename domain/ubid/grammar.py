"""UBID Bounded Context - Textual Grammar.

A UBID is written as::

    <centroid grid code>-<north>-<east>-<south>-<west>

The centroid grid code uses the grid system's own alphabet and separator
(4 to 8 characters, the separator, then optional trailing characters). Each
distance is a Chebyshev distance in grid cells from the matching edge of the
centroid cell to the matching edge of the bounding box, written as a
non-negative integer without leading zeros.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.ubid.errors import InvalidUbidError

# ---------------------------------------------------------------------------
# Grammar Constants
# ---------------------------------------------------------------------------
UBID_SEPARATOR = "-"

# Non-negative integer, no leading zeros
DISTANCE_PATTERN = "(0|[1-9][0-9]*)"

# Characters allowed before the grid separator in the centroid code
CENTROID_MIN_PREFIX = 4
CENTROID_MAX_PREFIX = 8

# Capture groups
GROUP_CENTROID = 1
GROUP_NORTH = 2
GROUP_EAST = 3
GROUP_SOUTH = 4
GROUP_WEST = 5


class UbidComponents(BaseModel):
    """Parsed UBID: centroid grid code and four Chebyshev distances (Value Object)."""

    centroid_code: str
    north: int = Field(ge=0)
    east: int = Field(ge=0)
    south: int = Field(ge=0)
    west: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


@lru_cache(maxsize=None)
def compile_pattern(code_alphabet: str, grid_separator: str) -> re.Pattern[str]:
    """Compile the UBID pattern for a grid alphabet and separator.

    Cached per (alphabet, separator) pair; the returned pattern is immutable
    and safe to share across threads. Match it with ``fullmatch``.
    """
    alphabet = f"[{re.escape(code_alphabet)}]"
    centroid = (
        f"({alphabet}{{{CENTROID_MIN_PREFIX},{CENTROID_MAX_PREFIX}}}"
        f"{re.escape(grid_separator)}{alphabet}*)"
    )
    separator = re.escape(UBID_SEPARATOR)
    return re.compile(separator.join([centroid] + [DISTANCE_PATTERN] * 4))


def parse_ubid(code: Any, pattern: re.Pattern[str]) -> UbidComponents:
    """Split a UBID into its centroid code and distances.

    Only the outer grammar is checked; whether the centroid is a real grid
    code is left to the grid codec.

    Raises:
        InvalidUbidError: If code is not a string, does not match pattern,
            or a distance has too many digits to convert
    """
    if not isinstance(code, str):
        raise InvalidUbidError(code, "UBID must be a string")

    md = pattern.fullmatch(code)
    if md is None:
        raise InvalidUbidError(code)

    try:
        north, east, south, west = (
            int(md.group(group))
            for group in (GROUP_NORTH, GROUP_EAST, GROUP_SOUTH, GROUP_WEST)
        )
    except ValueError as e:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise InvalidUbidError(code, "Distance out of range") from e

    return UbidComponents(
        centroid_code=md.group(GROUP_CENTROID),
        north=north,
        east=east,
        south=south,
        west=west,
    )


def round_distance(ratio: float) -> int:
    """Round a raw Chebyshev ratio to a whole number of cells.

    Uses round-half-away-from-zero on the exact binary value of ratio, so
    0.5 -> 1 and 2.5 -> 3 (Python's own round() and "%.0f" would give 0 and 2).
    """
    return int(Decimal(ratio).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_ubid(
    centroid_code: str, north: float, east: float, south: float, west: float
) -> str:
    """Render a UBID, rounding each distance to an integer."""
    distances = (round_distance(d) for d in (north, east, south, west))
    return UBID_SEPARATOR.join([centroid_code, *(str(d) for d in distances)])
