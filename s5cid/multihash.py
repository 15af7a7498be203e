"""
Multihash assembly — [hash-function id: 1B][digest: NB].

The only hash function in use is BLAKE3 (id 0x1f, 32-byte digest).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .basecodec import encode_base64url
from .errors import MalformedMultihash

DIGEST_LENGTH: int = 32                     # BLAKE3 output size


class MultihashType(IntEnum):
    BLAKE3 = 0x1F


@dataclass(frozen=True)
class Multihash:
    hash_id: int
    digest: bytes

    def to_bytes(self) -> bytes:
        return build_multihash(self.hash_id, self.digest)


def build_multihash(hash_id: int, digest: bytes) -> bytes:
    """Prepend the one-byte *hash_id* to *digest*."""
    if not digest:
        raise MalformedMultihash("Digest is empty")
    if not 0 <= hash_id <= 0xFF:
        raise MalformedMultihash(f"Hash id {hash_id} does not fit in one byte")
    return bytes([hash_id]) + bytes(digest)


def split_multihash(multihash: bytes) -> Multihash:
    """Split *multihash* into its id byte and digest."""
    if not multihash:
        raise MalformedMultihash("Multihash is empty")
    if len(multihash) == 1:
        raise MalformedMultihash(f"Multihash 0x{multihash[0]:02x} has no digest")
    return Multihash(hash_id=multihash[0], digest=bytes(multihash[1:]))


def multihash_from_blake3(digest: bytes) -> bytes:
    return build_multihash(MultihashType.BLAKE3, digest)


def multihash_to_base64url(multihash: bytes) -> str:
    return encode_base64url(multihash)
