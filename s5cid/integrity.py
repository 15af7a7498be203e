"""
Integrity helpers — BLAKE3 hashing and raw-data CIDs.

hash_bytes(data)    → bytes[32]   (raw digest)
hash_file(path)     → bytes[32]   (streamed, 1 MiB chunks)
cid_for_bytes(data) → bytes[38]   (binary CID of type RAW)
cid_for_file(path)  → bytes[38]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

import blake3 as _b3

from .errors import MalformedCID
from .files import CHUNK_SIZE, chunk_file
from .multihash import multihash_from_blake3
from .protocol import MAX_SIZE, CidType, cid_from_multihash

log = logging.getLogger("s5cid.integrity")


def hash_bytes(data: bytes) -> bytes:
    """Return the 32-byte BLAKE3 digest of *data*."""
    return _b3.blake3(data).digest()


def verify(data: bytes, expected: bytes) -> bool:
    """Return True if BLAKE3(data) == expected digest."""
    return hash_bytes(data) == expected


def hash_stream(chunks: Iterable[bytes]) -> bytes:
    """Feed *chunks* to one incremental hasher and return the final digest."""
    hasher = _b3.blake3()
    for chunk in chunks:
        hasher.update(chunk)
    return hasher.digest()


def hash_file(
    path: Path | str,
    chunk_size: int = CHUNK_SIZE,
    on_progress: Callable[[int], None] | None = None,
) -> bytes:
    """
    Stream *path* through BLAKE3. *on_progress* is called with the byte
    count of every chunk after it has been read.
    """
    def _chunks() -> Iterable[bytes]:
        for block in chunk_file(path, chunk_size):
            if on_progress is not None:
                on_progress(len(block))
            yield block

    digest = hash_stream(_chunks())
    log.debug("BLAKE3 %s = %s", path, digest.hex())
    return digest


def cid_for_bytes(data: bytes, cid_type: int = CidType.RAW) -> bytes:
    return cid_from_multihash(multihash_from_blake3(hash_bytes(data)), len(data), cid_type)


def cid_for_file(
    path: Path | str,
    chunk_size: int = CHUNK_SIZE,
    on_progress: Callable[[int], None] | None = None,
    cid_type: int = CidType.RAW,
) -> bytes:
    """
    Hash *path* and return its binary CID.

    The declared size is the number of bytes fed to the hasher, so a file
    that changes while it is read still gets a consistent size and digest.
    """
    size = Path(path).stat().st_size
    if size > MAX_SIZE:
        raise MalformedCID(f"{path} is {size} bytes; a CID can declare at most {MAX_SIZE}")
    hashed = 0

    def _count(n: int) -> None:
        nonlocal hashed
        hashed += n
        if on_progress is not None:
            on_progress(n)

    digest = hash_file(path, chunk_size, _count)
    if hashed > MAX_SIZE:
        raise MalformedCID(f"{path} grew to {hashed} bytes while hashing; "
                           f"a CID can declare at most {MAX_SIZE}")
    if hashed != size:
        log.warning("%s changed while hashing (%d -> %d bytes)", path, size, hashed)
    return cid_from_multihash(multihash_from_blake3(digest), hashed, cid_type)
