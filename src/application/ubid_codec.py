"""UBID codec facade.

Binds the pure domain services in ``domain.ubid.services`` to one GridCodec
so callers can encode and decode UBIDs without passing the grid around.

The process-wide default codec is built once at import time (the import
lock makes this initialize-once) and is read-only afterwards, so it can be
shared by any number of threads without locking.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from domain.ubid import services
from domain.ubid.errors import GridCodeError, InvalidArgumentError
from domain.ubid.ports import GridCodec
from domain.ubid.value_objects import BoundingArea
from infrastructure.olc import OpenLocationCodeAdapter

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class UbidCodec:
    """Encode, decode and validate UBIDs against a single grid codec.

    Parameters
    ----------
    grid: GridCodec | None
        Grid geocoding system for centroid and corner codes. Defaults to the
        shared OpenLocationCodeAdapter.
    default_code_length: int | None
        Grid code length used by encode() when none is given. Defaults to
        the grid's pair code length. Checked at construction.
    """

    def __init__(
        self,
        grid: GridCodec | None = None,
        default_code_length: int | None = None,
    ) -> None:
        self.grid: GridCodec = grid if grid is not None else _DEFAULT_GRID
        if default_code_length is None:
            default_code_length = self.grid.pair_code_length
        self.default_code_length = default_code_length

        # Encode once so a bad precision fails here, not on first encode
        try:
            self.grid.encode(0.0, 0.0, default_code_length)
        except GridCodeError as e:
            raise InvalidArgumentError(
                f"Unsupported default code length: {default_code_length}"
            ) from e

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled UBID grammar for this codec's grid."""
        return services.pattern_for(self.grid)

    def decode(self, code: str) -> BoundingArea:
        """Decode a UBID. Raises InvalidUbidError."""
        area = services.decode(self.grid, code)
        logger.debug(
            "Decoded %s -> N=%.7f S=%.7f E=%.7f W=%.7f",
            code,
            area.north_latitude,
            area.south_latitude,
            area.east_longitude,
            area.west_longitude,
        )
        return area

    def encode(
        self,
        latitude_lo: float,
        longitude_lo: float,
        latitude_hi: float,
        longitude_hi: float,
        latitude_center: float,
        longitude_center: float,
        code_length: int | None = None,
    ) -> str:
        """Encode a minimal bounding box and centroid. Raises InvalidBoundingBoxError."""
        if code_length is None:
            code_length = self.default_code_length
        return services.encode(
            self.grid,
            latitude_lo,
            longitude_lo,
            latitude_hi,
            longitude_hi,
            latitude_center,
            longitude_center,
            code_length=code_length,
        )

    def encode_area(self, area: BoundingArea | None) -> str:
        """Encode a BoundingArea at its own code length. Raises InvalidArgumentError."""
        return services.encode_area(self.grid, area)

    def is_valid(self, code: Any) -> bool:
        """Check a UBID. Never raises."""
        return services.is_valid(self.grid, code)


# Shared instances, constructed once at import
_DEFAULT_GRID: GridCodec = OpenLocationCodeAdapter()
_DEFAULT_CODEC = UbidCodec(_DEFAULT_GRID)


def default_codec() -> UbidCodec:
    """Return the process-wide UbidCodec backed by Open Location Code."""
    return _DEFAULT_CODEC
