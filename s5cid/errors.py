"""
Error hierarchy for the CID codecs.

Every failure derives from CidError (a ValueError), so callers can catch
the whole family at once or pick out a single kind.
"""

from __future__ import annotations


class CidError(ValueError):
    """Base class for all codec failures."""


class MalformedEncoding(CidError):
    """An encoded body cannot be turned back into bytes."""


class InvalidAlphabet(MalformedEncoding):
    """A character is outside the codec's alphabet."""

    def __init__(self, codec: str, char: str, position: int) -> None:
        super().__init__(
            f"Invalid {codec} character {char!r} at position {position}")
        self.codec = codec
        self.char = char
        self.position = position


class MalformedMultihash(CidError):
    """Empty or truncated multihash."""


class MalformedCID(CidError):
    """Binary CID of the wrong length, or an unrecognized textual shape."""


class InvalidCID(CidError):
    """Textual CID whose leading character selects no known encoding."""
