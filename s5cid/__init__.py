"""
s5cid — codecs for S5 content identifiers.

A CID is [type 1B][multihash 33B][size 4B LE] with three text forms:
'z' + base58, 'u' + base64url and 'b' + base32.
"""

from __future__ import annotations

from .basecodec import (
    decode_base32,
    decode_base58,
    decode_base64url,
    encode_base32,
    encode_base58,
    encode_base64url,
)
from .convert import (
    base32_to_base58,
    base32_to_base64url,
    base58_to_base32,
    base58_to_base64url,
    base64url_to_base32,
    base64url_to_base58,
    convert_cid,
)
from .errors import (
    CidError,
    InvalidAlphabet,
    InvalidCID,
    MalformedCID,
    MalformedEncoding,
    MalformedMultihash,
)
from .info import CidInfo, all_representations, cid_to_multihash, cid_to_multihash_base64url
from .multihash import (
    Multihash,
    MultihashType,
    build_multihash,
    multihash_from_blake3,
    multihash_to_base64url,
    split_multihash,
)
from .protocol import (
    CID_LENGTH,
    MULTIHASH_LENGTH,
    CidParts,
    CidType,
    assemble_cid,
    cid_from_multihash,
    decode_b,
    decode_cid,
    decode_prefixed,
    decode_u,
    decode_with_prefix,
    decode_z,
    disassemble_cid,
    encode_with_prefix,
)
from .varint import pack_le, unpack_le

__version__ = "0.1.0"
