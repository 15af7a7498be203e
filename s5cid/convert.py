"""
Direct re-encoding between the three CID text forms.

Each converter strips the source prefix, decodes the body, and re-encodes
the same bytes under the target prefix. The binary CID is never changed.
"""

from __future__ import annotations

from .errors import InvalidCID
from .protocol import (
    PREFIX_BASE32,
    PREFIX_BASE58,
    PREFIX_BASE64URL,
    PREFIXES,
    decode_prefixed,
    encode_with_prefix,
)


def _reencode(cid: str, source: str, target: str) -> str:
    head = cid[:1].lower() if source == PREFIX_BASE32 else cid[:1]
    if head != source:
        raise InvalidCID(f"Expected a {source!r}-prefixed CID, got {cid!r}")
    return encode_with_prefix(target, decode_prefixed(source, cid))


def base58_to_base32(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE58, PREFIX_BASE32)


def base32_to_base58(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE32, PREFIX_BASE58)


def base64url_to_base58(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE64URL, PREFIX_BASE58)


def base58_to_base64url(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE58, PREFIX_BASE64URL)


def base64url_to_base32(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE64URL, PREFIX_BASE32)


def base32_to_base64url(cid: str) -> str:
    return _reencode(cid, PREFIX_BASE32, PREFIX_BASE64URL)


def convert_cid(cid: str, target: str) -> str:
    """
    Re-encode a prefixed *cid* under *target* ('z', 'u' or 'b').

    The source encoding is picked from the first char; an uppercase 'B' is
    read as base32, as the direct converters do.
    """
    if target not in PREFIXES:
        raise InvalidCID(f"Unknown target encoding {target!r}")
    source = PREFIX_BASE32 if cid[:1] == "B" else cid[:1]
    if source not in PREFIXES:
        raise InvalidCID(f"Unknown CID encoding {source!r} in {cid!r}")
    return encode_with_prefix(target, decode_prefixed(source, cid))
