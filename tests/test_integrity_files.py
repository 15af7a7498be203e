"""Tests for BLAKE3 hashing, raw-data CIDs and the file walker."""

from __future__ import annotations

from pathlib import Path

import pytest

from s5cid.errors import MalformedCID
from s5cid.files import chunk_file, walk_targets
from s5cid.integrity import (
    cid_for_bytes,
    cid_for_file,
    hash_bytes,
    hash_file,
    hash_stream,
    verify,
)
from s5cid.multihash import MultihashType
from s5cid.protocol import CidType, disassemble_cid

EMPTY_BLAKE3 = "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"


def _write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------

def test_hash_bytes_known_empty_digest() -> None:
    assert hash_bytes(b"").hex() == EMPTY_BLAKE3


def test_verify() -> None:
    digest = hash_bytes(b"payload")
    assert verify(b"payload", digest)
    assert not verify(b"payloaD", digest)


def test_hash_stream_matches_one_shot() -> None:
    data = bytes(range(256)) * 40
    chunks = [data[i:i + 333] for i in range(0, len(data), 333)]
    assert hash_stream(chunks) == hash_bytes(data)


def test_hash_file_reports_progress(tmp_path: Path) -> None:
    data = b"x" * 10_000
    path = _write(tmp_path / "f.bin", data)
    seen: list[int] = []
    assert hash_file(path, chunk_size=4096, on_progress=seen.append) == hash_bytes(data)
    assert seen == [4096, 4096, 1808]


def test_hash_empty_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "empty", b"")
    assert hash_file(path).hex() == EMPTY_BLAKE3


# ---------------------------------------------------------------------------
# CIDs for content
# ---------------------------------------------------------------------------

def test_cid_for_bytes_layout() -> None:
    data = b"hello world"
    parts = disassemble_cid(cid_for_bytes(data))
    assert parts.type_byte == CidType.RAW
    assert parts.multihash[0] == MultihashType.BLAKE3
    assert parts.multihash[1:] == hash_bytes(data)
    assert parts.size == len(data)


def test_cid_for_file_matches_bytes(tmp_path: Path) -> None:
    data = bytes(range(256)) * 4097
    path = _write(tmp_path / "big.bin", data)
    assert cid_for_file(path, chunk_size=65536) == cid_for_bytes(data)


def test_cid_for_file_other_type(tmp_path: Path) -> None:
    path = _write(tmp_path / "m.json", b"{}")
    assert cid_for_file(path, cid_type=CidType.METADATA_WEBAPP)[0] == 0x59


def test_cid_for_file_rejects_size_beyond_field(tmp_path: Path) -> None:
    path = tmp_path / "sparse.bin"
    with open(path, "wb") as fh:
        fh.truncate(2**32)
    with pytest.raises(MalformedCID):
        cid_for_file(path)


def test_cid_for_file_declares_bytes_actually_hashed(tmp_path: Path) -> None:
    path = _write(tmp_path / "growing.log", b"a" * 10)

    def _append_once(n: int) -> None:
        if path.stat().st_size == 10:
            with open(path, "ab") as fh:
                fh.write(b"b" * 6)

    cid = cid_for_file(path, chunk_size=4, on_progress=_append_once)
    assert cid == cid_for_bytes(b"a" * 10 + b"b" * 6)
    assert disassemble_cid(cid).size == 16


# ---------------------------------------------------------------------------
# Walker
# ---------------------------------------------------------------------------

def test_walk_targets_files_and_dirs(tmp_path: Path) -> None:
    _write(tmp_path / "docs" / "b.txt", b"bb")
    _write(tmp_path / "docs" / "a.txt", b"a")
    _write(tmp_path / "docs" / "sub" / "c.txt", b"ccc")
    single = _write(tmp_path / "single.bin", b"1234")

    entries = list(walk_targets([tmp_path / "docs", single]))
    assert [e.rel_path for e in entries] == [
        "docs/a.txt", "docs/b.txt", "docs/sub/c.txt", "single.bin"]
    assert [e.size for e in entries] == [1, 2, 3, 4]


def test_walk_targets_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(walk_targets([tmp_path / "nope"]))


def test_chunk_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "f", b"abcdefg")
    assert list(chunk_file(path, 3)) == [b"abc", b"def", b"g"]
    assert list(chunk_file(_write(tmp_path / "e", b""), 3)) == []


def test_chunk_file_rejects_bad_size(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        list(chunk_file(_write(tmp_path / "f", b"x"), 0))
