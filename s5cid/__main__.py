"""
s5cid — S5 content identifier tool  CLI entry point.

Usage:
    python -m s5cid hash <path> [<path>...] [--encoding z|u|b] [--chunk-size N] [--quiet]
    python -m s5cid info <cid>
    python -m s5cid convert <cid> --to z|u|b
"""

from __future__ import annotations

import argparse
import logging
import sys

from .convert import convert_cid
from .errors import CidError
from .files import CHUNK_SIZE, walk_targets
from .info import all_representations
from .integrity import cid_for_file
from .multihash import MultihashType
from .progress import NullProgress, ProgressTracker
from .protocol import PREFIXES, CidType, encode_with_prefix

log = logging.getLogger("s5cid.cli")


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        level=level,
    )


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_hash(args: argparse.Namespace) -> int:
    """Print the CID of every file under the given paths."""
    try:
        entries = list(walk_targets(args.paths))
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not entries:
        print("No files to hash.", file=sys.stderr)
        return 1

    total_size = sum(e.size for e in entries)
    log.info("Hashing %d file(s), %s", len(entries), _fmt_size(total_size))

    progress: ProgressTracker | NullProgress
    if args.quiet:
        progress = NullProgress()
    else:
        progress = ProgressTracker(total_files=len(entries), total_bytes=total_size)
        progress.start()

    results: list[tuple[str, str]] = []
    exit_code = 0
    try:
        for entry in entries:
            with progress.file(entry.rel_path, entry.size) as fp:
                cid = cid_for_file(entry.abs_path, chunk_size=args.chunk_size,
                                   on_progress=fp.advance)
                text = encode_with_prefix(args.encoding, cid)
                fp.done(text)
            results.append((text, entry.rel_path))
    except (CidError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1
    finally:
        progress.stop()

    for text, rel_path in results:
        print(f"{text}  {rel_path}")
    return exit_code


def cmd_info(args: argparse.Namespace) -> int:
    """Show every representation of a CID."""
    try:
        info = all_representations(args.cid)
    except CidError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    rows = [
        ("base58", info.z),
        ("base64url", info.u),
        ("base32", info.b),
        ("type", _enum_name(CidType, info.cid_type)),
        ("hash", _enum_name(MultihashType, info.hash_id)),
        ("multihash", info.multihash_base64url),
        ("digest", info.digest_hex),
        ("size", f"{info.declared_size} ({_fmt_size(info.declared_size)})"),
    ]
    for name, value in rows:
        print(f"{name:<10} {value}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Re-encode a CID under another prefix."""
    try:
        print(convert_cid(args.cid, args.to))
    except CidError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fmt_size(n: float) -> str:
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if n < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} PB"


def _enum_name(enum_cls: type, value: int) -> str:
    try:
        return f"{enum_cls(value).name} (0x{value:02x})"
    except ValueError:
        return f"unknown (0x{value:02x})"


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s5cid",
        description="s5cid — S5 content identifiers (BLAKE3, base58/base32/base64url)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    # --- hash ---
    p_hash = sub.add_parser("hash", help="Compute the CID of files/folders")
    p_hash.add_argument("paths", nargs="+", help="Files or directories to hash")
    p_hash.add_argument("--encoding", default="z", choices=PREFIXES,
                        help="CID text form: z=base58, u=base64url, b=base32 (default z)")
    p_hash.add_argument("--chunk-size", type=_positive_int, default=CHUNK_SIZE,
                        help=f"Bytes per hasher update (default {CHUNK_SIZE})")
    p_hash.add_argument("--quiet", action="store_true", help="No progress bars")

    # --- info ---
    p_info = sub.add_parser("info", help="Show every representation of a CID")
    p_info.add_argument("cid", help="CID starting with z, u or b")

    # --- convert ---
    p_conv = sub.add_parser("convert", help="Re-encode a CID")
    p_conv.add_argument("cid", help="CID starting with z, u or b")
    p_conv.add_argument("--to", required=True, choices=PREFIXES,
                        help="Target encoding: z, u or b")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    handlers = {
        "hash":    cmd_hash,
        "info":    cmd_info,
        "convert": cmd_convert,
    }
    sys.exit(handlers[args.command](args))


if __name__ == "__main__":
    main()
