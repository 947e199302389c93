"""Open Location Code adapter for GridCodec.

Implements the grid geocoding port with the ``openlocationcode`` library,
returning domain GridCell Value Objects.

Error translation:
1) Non-finite coordinates are rejected up front (the library clamps NaN
   silently instead of failing)
2) ValueError / TypeError / OverflowError from the library -> GridCodeError
3) Valid-looking codes that are not full codes -> GridCodeError on decode
"""

from __future__ import annotations

import logging
import math

from openlocationcode import openlocationcode as olc

from domain.ubid.errors import GridCodeError
from domain.ubid.value_objects import GridCell

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_LIBRARY_ERRORS = (ValueError, TypeError, OverflowError)


class OpenLocationCodeAdapter:
    """Infrastructure adapter exposing Open Location Code as a GridCodec.

    Stateless: one instance may be shared by any number of threads.
    """

    separator: str = olc.SEPARATOR_
    code_alphabet: str = olc.CODE_ALPHABET_
    pair_code_length: int = olc.PAIR_CODE_LENGTH_

    def encode(self, latitude: float, longitude: float, code_length: int) -> str:
        """Encode a point as an OLC of code_length digits (separator excluded).

        Raises:
            GridCodeError: If code_length is unsupported or a coordinate is
                not a finite number
        """
        try:
            if not (math.isfinite(latitude) and math.isfinite(longitude)):
                raise ValueError(f"Non-finite coordinate ({latitude}, {longitude})")
            return olc.encode(latitude, longitude, code_length)
        except _LIBRARY_ERRORS as e:
            logger.debug(
                "OLC encode rejected (%r, %r) at length %r: %s",
                latitude,
                longitude,
                code_length,
                e,
            )
            raise GridCodeError(
                f"Cannot encode ({latitude}, {longitude}) at length {code_length}: {e}",
                value=(latitude, longitude, code_length),
            ) from e

    def decode(self, code: str) -> GridCell:
        """Decode a full OLC into its cell.

        Raises:
            GridCodeError: If code is not a valid full OLC
        """
        try:
            area = olc.decode(code)
        except _LIBRARY_ERRORS as e:
            logger.debug("OLC decode rejected %r: %s", code, e)
            raise GridCodeError(f"Invalid grid code: {code!r}", value=code) from e

        return GridCell(
            north_latitude=area.latitudeHi,
            south_latitude=area.latitudeLo,
            east_longitude=area.longitudeHi,
            west_longitude=area.longitudeLo,
            latitude_center=area.latitudeCenter,
            longitude_center=area.longitudeCenter,
            code_length=area.codeLength,
        )

    def is_valid(self, code: str) -> bool:
        """Return True if code is a valid full or short OLC."""
        return bool(olc.isValid(code))
