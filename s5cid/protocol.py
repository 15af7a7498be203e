"""
S5 CID — binary layout and prefix-tagged text forms.

Binary layout (38 bytes for BLAKE3):
  [type: 1B][multihash: 33B = hash_id 1B + digest 32B][size: 4B]

size is little-endian, always stored as exactly 4 bytes.

Text forms:
  'z' + base58(cid)      (53 chars; bare body ≤ 52)
  'u' + base64url(cid)   (52 chars; bare body ≤ 51)
  'b' + base32(cid)      (62 chars, lowercase; bare body ≤ 61)

A string without its prefix is accepted as a "bare" body; the two shapes
are told apart by length only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from .basecodec import (
    decode_base32,
    decode_base58,
    decode_base64url,
    encode_base32,
    encode_base58,
    encode_base64url,
)
from .errors import InvalidAlphabet, InvalidCID, MalformedCID
from .multihash import DIGEST_LENGTH
from .varint import pack_le, unpack_le

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MULTIHASH_LENGTH: int = 1 + DIGEST_LENGTH       # = 33
SIZE_FIELD_WIDTH: int = 4
CID_LENGTH: int = 1 + MULTIHASH_LENGTH + SIZE_FIELD_WIDTH   # = 38
MAX_SIZE: int = (1 << (8 * SIZE_FIELD_WIDTH)) - 1

PREFIX_BASE58: str = "z"
PREFIX_BASE64URL: str = "u"
PREFIX_BASE32: str = "b"
PREFIXES: tuple[str, ...] = (PREFIX_BASE58, PREFIX_BASE64URL, PREFIX_BASE32)

# Longest bare body for a 38-byte CID; a prefixed string is one char longer.
BARE_MAX_LENGTH: dict[str, int] = {
    PREFIX_BASE58: 52,
    PREFIX_BASE64URL: 51,
    PREFIX_BASE32: 61,
}


# ---------------------------------------------------------------------------
# CID type enum
# ---------------------------------------------------------------------------

class CidType(IntEnum):
    RESOLVER        = 0x25
    RAW             = 0x26
    BRIDGE          = 0x3A
    METADATA_WEBAPP = 0x59
    USER_IDENTITY   = 0x77
    ENCRYPTED       = 0xAE
    METADATA_MEDIA  = 0xC5


@dataclass(frozen=True)
class CidParts:
    type_byte: int
    multihash: bytes
    size: int


# ---------------------------------------------------------------------------
# Binary layout
# ---------------------------------------------------------------------------

def assemble_cid(type_byte: int, multihash: bytes, size: int) -> bytes:
    """Return [type_byte] + multihash + size as a fixed 4-byte LE field."""
    if not 0 <= type_byte <= 0xFF:
        raise MalformedCID(f"CID type {type_byte} does not fit in one byte")
    try:
        size_field = pack_le(size, SIZE_FIELD_WIDTH)
    except OverflowError as exc:
        raise MalformedCID(f"Size {size} does not fit in {SIZE_FIELD_WIDTH} bytes") from exc
    return (bytes([type_byte]) + bytes(multihash)
            + size_field.ljust(SIZE_FIELD_WIDTH, b"\0"))


def disassemble_cid(data: bytes, multihash_length: int = MULTIHASH_LENGTH) -> CidParts:
    """Split a binary CID into type byte, multihash and declared size."""
    expected = 1 + multihash_length + SIZE_FIELD_WIDTH
    if len(data) != expected:
        raise MalformedCID(f"CID is {len(data)} bytes, expected {expected}")
    end = 1 + multihash_length
    return CidParts(
        type_byte=data[0],
        multihash=bytes(data[1:end]),
        size=unpack_le(data[end:]),
    )


def cid_from_multihash(multihash: bytes, size: int, cid_type: int = CidType.RAW) -> bytes:
    return assemble_cid(cid_type, multihash, size)


# ---------------------------------------------------------------------------
# Prefix-tagged text
# ---------------------------------------------------------------------------

def _encode_base32_lower(data: bytes) -> str:
    return encode_base32(data).lower()


def _decode_base32_any_case(body: str) -> bytes:
    # str.upper() folds some non-ASCII letters onto A-Z (e.g. "\u0131" -> "I")
    for pos, char in enumerate(body):
        if not char.isascii():
            raise InvalidAlphabet("base32", char, pos)
    return decode_base32(body.upper())


_ENCODERS: dict[str, Callable[[bytes], str]] = {
    PREFIX_BASE58: encode_base58,
    PREFIX_BASE64URL: encode_base64url,
    PREFIX_BASE32: _encode_base32_lower,
}

_DECODERS: dict[str, Callable[[str], bytes]] = {
    PREFIX_BASE58: decode_base58,
    PREFIX_BASE64URL: decode_base64url,
    PREFIX_BASE32: _decode_base32_any_case,
}


def encode_with_prefix(prefix: str, data: bytes) -> str:
    """Return *prefix* followed by *data* in the prefix's encoding."""
    encoder = _ENCODERS.get(prefix)
    if encoder is None:
        raise MalformedCID(f"Unknown CID prefix {prefix!r}")
    return prefix + encoder(data)


def strip_prefix(prefix: str, text: str) -> str:
    """
    Return the encoded body of *text*, prefixed or bare.

    base32 also accepts an uppercase 'B' prefix; case is normalized by the
    decoder, not here.
    """
    bare_max = BARE_MAX_LENGTH.get(prefix)
    if bare_max is None:
        raise MalformedCID(f"Unknown CID prefix {prefix!r}")
    if prefix == PREFIX_BASE32:
        # 'b' and 'B' are base32 symbols too, so every short string is bare
        has_prefix = text[:1] in ("b", "B")
        if len(text) <= bare_max:
            return text
    else:
        has_prefix = text[:1] == prefix
        if not has_prefix and len(text) <= bare_max:
            return text
    if has_prefix and len(text) > bare_max:
        return text[1:]
    raise MalformedCID(
        f"{text!r} is neither a {prefix!r}-prefixed CID (> {bare_max} chars) "
        f"nor a bare body (≤ {bare_max} chars)")


def decode_with_prefix(prefix: str, text: str, strict: bool = False) -> bytes:
    """
    Decode a prefixed or bare CID string in the encoding named by *prefix*.

    With *strict*, the decoded bytes must be exactly CID_LENGTH long.
    """
    body = strip_prefix(prefix, text)
    data = _DECODERS[prefix](body)
    if strict and len(data) != CID_LENGTH:
        raise MalformedCID(f"Decoded CID is {len(data)} bytes, expected {CID_LENGTH}")
    return data


def decode_z(text: str, strict: bool = False) -> bytes:
    return decode_with_prefix(PREFIX_BASE58, text, strict)


def decode_u(text: str, strict: bool = False) -> bytes:
    return decode_with_prefix(PREFIX_BASE64URL, text, strict)


def decode_b(text: str, strict: bool = False) -> bytes:
    return decode_with_prefix(PREFIX_BASE32, text, strict)


def decode_prefixed(prefix: str, text: str, strict: bool = False) -> bytes:
    """Decode *text* that must carry *prefix*; bare bodies are refused."""
    bare_max = BARE_MAX_LENGTH.get(prefix)
    if bare_max is None:
        raise MalformedCID(f"Unknown CID prefix {prefix!r}")
    if len(text) <= bare_max:
        raise MalformedCID(f"{text!r} is too short for a {prefix!r}-prefixed CID")
    return decode_with_prefix(prefix, text, strict)


def decode_cid(text: str, strict: bool = False) -> bytes:
    """Decode a prefixed CID string, choosing the codec by its first char."""
    prefix = text[:1]
    if prefix not in PREFIXES:
        raise InvalidCID(f"Unknown CID encoding {prefix!r} in {text!r}")
    return decode_prefixed(prefix, text, strict)
