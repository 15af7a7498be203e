"""
File/folder walker and chunked streaming reader for hashing.

walk_targets(paths) → Iterator[FileEntry]
    Recursively yields FileEntry for every file in *paths*.
    Directories are walked recursively; individual files are emitted as-is.

chunk_file(path, chunk_size) → Iterator[bytes]
    Reads a file in raw chunks of *chunk_size* bytes so that large files
    never have to fit in memory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

CHUNK_SIZE: int = 1024 * 1024       # 1 MiB per hasher update

log = logging.getLogger("s5cid.files")


@dataclass
class FileEntry:
    abs_path: Path       # absolute path on disk
    rel_path: str        # path shown next to the CID
    size: int            # file size in bytes


def _entry(abs_path: Path, rel_path: str) -> FileEntry:
    return FileEntry(abs_path=abs_path, rel_path=rel_path, size=abs_path.stat().st_size)


def walk_targets(paths: list[str | Path]) -> Iterator[FileEntry]:
    """
    Yield a FileEntry for each file found under *paths*.

    * A plain file → single FileEntry with its basename as rel_path.
    * A directory  → all files inside, rel_path relative to parent of the dir.
    """
    for raw in paths:
        p = Path(raw).resolve()
        if p.is_file():
            yield _entry(p, p.name)
        elif p.is_dir():
            parent = p.parent
            for root, dirs, files in os.walk(p):
                dirs.sort()
                for fname in sorted(files):
                    abs_p = Path(root) / fname
                    rel = str(abs_p.relative_to(parent)).replace(os.sep, "/")
                    yield _entry(abs_p, rel)
        else:
            raise FileNotFoundError(f"Path not found: {p}")


def chunk_file(path: Path | str, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield raw chunks of *path* up to *chunk_size* bytes each."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    log.debug("Reading %s in %d-byte chunks", path, chunk_size)
    with open(path, "rb") as fh:
        while True:
            block = fh.read(chunk_size)
            if not block:
                break
            yield block
