"""
Base-N codecs — base58 (Bitcoin), base32 (RFC 4648, unpadded), base64url.

encode_base58(data)   → str      decode_base58(text)   → bytes
encode_base32(data)   → str      decode_base32(text)   → bytes
encode_base64url(data) → str     decode_base64url(text) → bytes

All functions are pure. Decoders raise InvalidAlphabet on the first
character outside their alphabet.
"""

from __future__ import annotations

import base64
import binascii

from .errors import InvalidAlphabet, MalformedEncoding

# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

BASE58_ALPHABET: str = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE32_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE64URL_ALPHABET: str = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)

_BASE58_INDEX: dict[str, int] = {c: i for i, c in enumerate(BASE58_ALPHABET)}
_BASE32_INDEX: dict[str, int] = {c: i for i, c in enumerate(BASE32_ALPHABET)}
_BASE64URL_CHARS: frozenset[str] = frozenset(BASE64URL_ALPHABET)


# ---------------------------------------------------------------------------
# base58 (Bitcoin alphabet)
# ---------------------------------------------------------------------------

def encode_base58(data: bytes) -> str:
    """Encode *data* as base58; each leading zero byte becomes a '1'."""
    value = int.from_bytes(data, "big")
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    digits = []
    while value:
        value, rem = divmod(value, 58)
        digits.append(BASE58_ALPHABET[rem])
    return BASE58_ALPHABET[0] * leading_zeros + "".join(reversed(digits))


def decode_base58(text: str) -> bytes:
    """Decode a base58 string, restoring leading zero bytes from leading '1's."""
    value = 0
    for pos, char in enumerate(text):
        digit = _BASE58_INDEX.get(char)
        if digit is None:
            raise InvalidAlphabet("base58", char, pos)
        value = value * 58 + digit
    leading_zeros = len(text) - len(text.lstrip(BASE58_ALPHABET[0]))
    body = value.to_bytes((value.bit_length() + 7) // 8, "big")
    return b"\0" * leading_zeros + body


# ---------------------------------------------------------------------------
# base32 (RFC 4648 alphabet, no '=' padding)
# ---------------------------------------------------------------------------

def encode_base32(data: bytes) -> str:
    """
    Pack *data* 8→5 bits MSB-first. The last group is filled with zero bits,
    so the result is exactly ceil(len(data) * 8 / 5) uppercase symbols.
    """
    out = []
    value = 0
    bits = 0
    for byte in data:
        value = (value << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(BASE32_ALPHABET[(value >> bits) & 0x1F])
        value &= (1 << bits) - 1
    if bits:
        out.append(BASE32_ALPHABET[(value << (5 - bits)) & 0x1F])
    return "".join(out)


def decode_base32(text: str) -> bytes:
    """
    Unpack uppercase base32 5→8 bits. Trailing bits that do not fill a
    whole byte are dropped.
    """
    out = bytearray()
    value = 0
    bits = 0
    for pos, char in enumerate(text):
        index = _BASE32_INDEX.get(char)
        if index is None:
            raise InvalidAlphabet("base32", char, pos)
        value = (value << 5) | index
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((value >> bits) & 0xFF)
        value &= (1 << bits) - 1
    return bytes(out)


# ---------------------------------------------------------------------------
# base64url (no padding)
# ---------------------------------------------------------------------------

def encode_base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64url(text: str) -> bytes:
    """Decode base64url with or without trailing '=' padding."""
    body = text.rstrip("=")
    for pos, char in enumerate(body):
        if char not in _BASE64URL_CHARS:
            raise InvalidAlphabet("base64url", char, pos)
    padding = "=" * (-len(body) % 4)
    try:
        return base64.urlsafe_b64decode(body + padding)
    except binascii.Error as exc:
        raise MalformedEncoding(f"Invalid base64url length {len(body)}: {exc}") from exc
