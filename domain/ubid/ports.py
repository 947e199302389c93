"""Domain Port(s) for grid geocoding.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete grid system here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import GridCell


class GridCodec(Protocol):
    """Port for a hierarchical grid geocoding system (e.g. Open Location Code).

    Implementations live in infrastructure (e.g., OpenLocationCodeAdapter).
    Implementations must be stateless and safe to share across threads.
    """

    separator: str  # Separator token inside a grid code
    code_alphabet: str  # Characters a grid code is built from
    pair_code_length: int  # Default precision (code length without separator)

    def encode(self, latitude: float, longitude: float, code_length: int) -> str:
        """Encode a point at the given precision.

        Raises GridCodeError if the code length is unsupported or the
        coordinates cannot be encoded.
        """
        ...

    def decode(self, code: str) -> GridCell:
        """Decode a grid code into its cell. Raises GridCodeError if invalid."""
        ...

    def is_valid(self, code: str) -> bool:
        """Return True if code is a well-formed grid code."""
        ...
