"""UBID Bounded Context - Value Objects.

Immutable data structures representing grid cells and UBID bounding areas.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
# Tolerance for edge-ordering checks, in decimal degrees
COORDINATE_TOLERANCE_DEG = 1e-9

# Shortest code length a grid system may report
MIN_CODE_LENGTH = 2


# ---------------------------------------------------------------------------
# GridCell
# ---------------------------------------------------------------------------
class GridCell(BaseModel):
    """Rectangular cell of the grid geocoding system (Value Object).

    Returned by GridCodec.decode; never mutated afterwards.

    Invariants:
        GC-1: north_latitude >= south_latitude
        GC-2: east_longitude >= west_longitude
        GC-3: code_length >= 2
    """

    north_latitude: float
    south_latitude: float
    east_longitude: float
    west_longitude: float
    latitude_center: float
    longitude_center: float
    code_length: int = Field(ge=MIN_CODE_LENGTH)  # Grid code length, no separator

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_edges(self) -> "GridCell":
        if self.north_latitude < self.south_latitude:
            raise ValueError(
                f"Invalid latitude ordering: north={self.north_latitude} "
                f"< south={self.south_latitude}"
            )
        if self.east_longitude < self.west_longitude:
            raise ValueError(
                f"Invalid longitude ordering: east={self.east_longitude} "
                f"< west={self.west_longitude}"
            )
        return self

    @property
    def height(self) -> float:
        """Cell height in degrees of latitude."""
        return self.north_latitude - self.south_latitude

    @property
    def width(self) -> float:
        """Cell width in degrees of longitude."""
        return self.east_longitude - self.west_longitude


# ---------------------------------------------------------------------------
# BoundingArea
# ---------------------------------------------------------------------------
class BoundingArea(BaseModel):
    """Bounding box of a building footprint anchored to its centroid cell (Value Object).

    The box is expressed in whole grid cells around the centroid cell, so it
    is usually larger than the cell itself.

    Invariants:
        BA-1: north_latitude >= south_latitude (within COORDINATE_TOLERANCE_DEG)
        BA-2: east_longitude >= west_longitude (within COORDINATE_TOLERANCE_DEG)
        BA-3: centroid_code_length >= 2
    """

    centroid_cell: GridCell  # Grid cell containing the footprint centroid
    centroid_code_length: int = Field(ge=MIN_CODE_LENGTH)
    north_latitude: float
    south_latitude: float
    east_longitude: float
    west_longitude: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_edges(self) -> "BoundingArea":
        if self.south_latitude - self.north_latitude > COORDINATE_TOLERANCE_DEG:
            raise ValueError(
                f"Invalid latitude ordering: north={self.north_latitude} "
                f"< south={self.south_latitude}"
            )
        if self.west_longitude - self.east_longitude > COORDINATE_TOLERANCE_DEG:
            raise ValueError(
                f"Invalid longitude ordering: east={self.east_longitude} "
                f"< west={self.west_longitude}"
            )
        return self

    def resize(self) -> "BoundingArea":
        """Return a copy with every edge moved inward by half a centroid cell.

        North and south move by half the cell height, east and west by half
        the cell width. Re-encoding the resized area reproduces the UBID it
        was decoded from, because each corner then sits in the middle of the
        grid cell it was encoded from rather than on its outer edge.

        No validation is performed: an area narrower than one cell (built
        directly from raw geometry) comes back with its edges crossed.

        Returns:
            New BoundingArea sharing this area's centroid_cell and
            centroid_code_length.
        """
        half_height = self.centroid_cell.height / 2.0
        half_width = self.centroid_cell.width / 2.0

        # model_copy skips validate_edges
        return self.model_copy(
            update={
                "north_latitude": self.north_latitude - half_height,
                "south_latitude": self.south_latitude + half_height,
                "east_longitude": self.east_longitude - half_width,
                "west_longitude": self.west_longitude + half_width,
            }
        )
