"""UBID Bounded Context - Domain Services.

Pure domain logic for encoding and decoding UBIDs.
NO concrete grid system here - grid work is delegated to a GridCodec port
implemented by infrastructure adapters (see `src/infrastructure/olc/`).
"""

from __future__ import annotations

import math
import re
from typing import Any

from domain.ubid.errors import (
    GridCodeError,
    InvalidArgumentError,
    InvalidBoundingBoxError,
    InvalidUbidError,
)
from domain.ubid.grammar import (
    compile_pattern,
    format_ubid,
    parse_ubid,
    round_distance,
)
from domain.ubid.ports import GridCodec
from domain.ubid.value_objects import BoundingArea, GridCell


def pattern_for(grid: GridCodec) -> re.Pattern[str]:
    """Return the compiled UBID pattern for a grid codec's alphabet and separator."""
    return compile_pattern(grid.code_alphabet, grid.separator)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------
def decode(grid: GridCodec, code: str) -> BoundingArea:
    """Decode a UBID into its bounding area.

    Distances are counted in whole cells outward from the matching edge of
    the centroid cell. The result is not resized; call
    BoundingArea.resize() before re-encoding.

    Args:
        grid: Grid codec the centroid code belongs to
        code: UBID string

    Returns:
        BoundingArea around the centroid cell

    Raises:
        InvalidUbidError: If code fails the grammar, its centroid cannot be
            decoded, or a distance is too large to represent as a coordinate

    Example:
        >>> area = decode(grid, "849VQJQ6+25-1-1-1-1")
        >>> area.north_latitude > area.centroid_cell.north_latitude
        True
    """
    components = parse_ubid(code, pattern_for(grid))

    try:
        cell = grid.decode(components.centroid_code)
    except GridCodeError as e:
        raise InvalidUbidError(code, "Invalid centroid grid code") from e

    height = cell.height
    width = cell.width

    try:
        north = cell.north_latitude + components.north * height
        south = cell.south_latitude - components.south * height
        east = cell.east_longitude + components.east * width
        west = cell.west_longitude - components.west * width
    except OverflowError as e:
        raise InvalidUbidError(code, "Distance out of range") from e
    if not all(math.isfinite(edge) for edge in (north, south, east, west)):
        raise InvalidUbidError(code, "Distance out of range")

    return BoundingArea(
        centroid_cell=cell,
        centroid_code_length=len(components.centroid_code) - len(grid.separator),
        north_latitude=north,
        south_latitude=south,
        east_longitude=east,
        west_longitude=west,
    )


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------
def _cell_at(
    grid: GridCodec, latitude: float, longitude: float, code_length: int
) -> tuple[str, GridCell]:
    """Encode a point and decode it back, returning (code, cell)."""
    try:
        code = grid.encode(latitude, longitude, code_length)
        return code, grid.decode(code)
    except GridCodeError as e:
        raise InvalidBoundingBoxError(
            f"Cannot encode ({latitude}, {longitude}) at code length {code_length}: {e}"
        ) from e


def encode(
    grid: GridCodec,
    latitude_lo: float,
    longitude_lo: float,
    latitude_hi: float,
    longitude_hi: float,
    latitude_center: float,
    longitude_center: float,
    code_length: int | None = None,
) -> str:
    """Encode a footprint's minimal bounding box and centroid as a UBID.

    Corners and centroid are snapped to grid cells first, so the distances
    are computed from cell edges rather than from the raw coordinates.

    Args:
        grid: Grid codec used for the centroid and corners
        latitude_lo: Latitude of the southwest corner
        longitude_lo: Longitude of the southwest corner
        latitude_hi: Latitude of the northeast corner
        longitude_hi: Longitude of the northeast corner
        latitude_center: Latitude of the footprint centroid
        longitude_center: Longitude of the footprint centroid
        code_length: Grid code length. If None, the grid's pair code length

    Returns:
        UBID string

    Raises:
        InvalidBoundingBoxError: If any point cannot be encoded at code_length,
            or the centroid lies outside the box
    """
    if code_length is None:
        code_length = grid.pair_code_length

    _, northeast = _cell_at(grid, latitude_hi, longitude_hi, code_length)
    _, southwest = _cell_at(grid, latitude_lo, longitude_lo, code_length)
    centroid_code, centroid = _cell_at(
        grid, latitude_center, longitude_center, code_length
    )

    height = centroid.height
    width = centroid.width

    # Chebyshev distances in grid units
    delta_north = (northeast.north_latitude - centroid.north_latitude) / height
    delta_east = (northeast.east_longitude - centroid.east_longitude) / width
    delta_south = (centroid.south_latitude - southwest.south_latitude) / height
    delta_west = (centroid.west_longitude - southwest.west_longitude) / width

    deltas = (delta_north, delta_east, delta_south, delta_west)
    if not all(math.isfinite(d) for d in deltas):
        raise InvalidBoundingBoxError(f"Non-finite grid distance: {deltas}")
    if any(round_distance(d) < 0 for d in deltas):
        raise InvalidBoundingBoxError(
            f"Centroid cell {centroid_code} lies outside the bounding box"
        )

    return format_ubid(centroid_code, *deltas)


def encode_area(grid: GridCodec, area: BoundingArea | None) -> str:
    """Encode a BoundingArea at its own centroid code length.

    Raises:
        InvalidArgumentError: If area is None
        InvalidBoundingBoxError: As for encode
    """
    if area is None:
        raise InvalidArgumentError("Invalid BoundingArea: None")

    return encode(
        grid,
        area.south_latitude,
        area.west_longitude,
        area.north_latitude,
        area.east_longitude,
        area.centroid_cell.latitude_center,
        area.centroid_cell.longitude_center,
        code_length=area.centroid_code_length,
    )


# ---------------------------------------------------------------------------
# Validate
# ---------------------------------------------------------------------------
def is_valid(grid: GridCodec, code: Any) -> bool:
    """Check the UBID grammar and the centroid grid code. Never raises."""
    if code is None:
        return False

    try:
        components = parse_ubid(code, pattern_for(grid))
    except InvalidUbidError:
        return False

    return bool(grid.is_valid(components.centroid_code))
