"""UBID Bounded Context - Error Hierarchy.

Custom exceptions for UBID operations.
"""

from __future__ import annotations

from typing import Any


class UbidError(Exception):
    """Base error for UBID operations."""


class InvalidUbidError(UbidError):
    """String fails the UBID grammar, or its centroid is not a decodable grid code.

    Attributes:
        code: The offending UBID string (may be any object passed by the caller)
    """

    def __init__(self, code: Any, reason: str = "Invalid UBID") -> None:
        self.code = code
        super().__init__(f"{reason}: {code!r}")


class InvalidBoundingBoxError(UbidError):
    """Bounding box corners or centroid cannot be encoded on the grid."""


class InvalidArgumentError(UbidError):
    """Required argument is missing or unusable."""


class GridCodeError(UbidError):
    """Grid codec rejected a coordinate, code length or code.

    Raised by GridCodec adapters; domain services translate it into the
    operation-specific error.

    Attributes:
        value: The rejected input
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)
