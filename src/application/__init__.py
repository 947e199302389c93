"""Application Layer.

Binds the UBID domain services to a concrete grid codec.
"""

from .ubid_codec import UbidCodec, default_codec

__all__ = ["UbidCodec", "default_codec"]
