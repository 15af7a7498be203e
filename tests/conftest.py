from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from s5cid.multihash import MultihashType, build_multihash  # noqa: E402
from s5cid.protocol import CidType, assemble_cid  # noqa: E402


@pytest.fixture
def zero_multihash() -> bytes:
    return build_multihash(MultihashType.BLAKE3, bytes(32))


@pytest.fixture
def sample_cid() -> bytes:
    digest = bytes(range(1, 33))
    return assemble_cid(CidType.RAW, build_multihash(MultihashType.BLAKE3, digest), 123456)
