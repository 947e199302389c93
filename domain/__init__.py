"""Building ID Domain Layer.

This package contains the core business logic organized by bounded contexts:
- ubid: UBID grammar, bounding areas, encode/decode against a grid codec
"""

from domain import ubid

__all__ = ["ubid"]
