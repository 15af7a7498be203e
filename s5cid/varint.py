"""
Little-endian integer packing for the CID size field.

pack_le(value, width) → bytes   (minimal, high zero bytes dropped)
unpack_le(data)       → int     (missing high bytes read as zero)

0 packs to b"" — callers that need a fixed-width field pad it themselves.
"""

from __future__ import annotations


def pack_le(value: int, width: int) -> bytes:
    """
    Return *value* as at most *width* little-endian bytes, without the
    trailing (most significant) zero bytes.

    Raises OverflowError if *value* is negative or needs more than *width* bytes.
    """
    return value.to_bytes(width, "little").rstrip(b"\0")


def unpack_le(data: bytes) -> int:
    return int.from_bytes(data, "little")
