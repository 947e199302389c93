"""UBID Bounded Context.

Responsible for Unique Building Identifiers:
- Value Objects: GridCell, BoundingArea
- Ports: GridCodec (implemented by infrastructure adapters)
- Services: decode, encode, encode_area, is_valid
"""
