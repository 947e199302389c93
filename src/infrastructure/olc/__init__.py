"""Infrastructure adapters for the UBID bounded context.

This module provides the GridCodec implementation backed by the
``openlocationcode`` library.
"""

from .olc_adapter import OpenLocationCodeAdapter

__all__ = ["OpenLocationCodeAdapter"]
