"""
Aggregate view of a CID — every text form plus its decoded fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from .multihash import multihash_to_base64url, split_multihash
from .protocol import (
    PREFIX_BASE32,
    PREFIX_BASE58,
    PREFIX_BASE64URL,
    decode_cid,
    disassemble_cid,
    encode_with_prefix,
)


@dataclass(frozen=True)
class CidInfo:
    z: str
    u: str
    b: str
    multihash_base64url: str
    digest_hex: str
    declared_size: int
    cid_type: int
    hash_id: int


def all_representations(cid: str) -> CidInfo:
    """Decode *cid* once and derive every other form from the bytes."""
    data = decode_cid(cid)
    parts = disassemble_cid(data)
    mhash = split_multihash(parts.multihash)
    return CidInfo(
        z=encode_with_prefix(PREFIX_BASE58, data),
        u=encode_with_prefix(PREFIX_BASE64URL, data),
        b=encode_with_prefix(PREFIX_BASE32, data),
        multihash_base64url=multihash_to_base64url(parts.multihash),
        digest_hex=mhash.digest.hex(),
        declared_size=parts.size,
        cid_type=parts.type_byte,
        hash_id=mhash.hash_id,
    )


def cid_to_multihash(cid: str) -> bytes:
    return disassemble_cid(decode_cid(cid)).multihash


def cid_to_multihash_base64url(cid: str) -> str:
    return multihash_to_base64url(cid_to_multihash(cid))
