# dictidx/tools/dump_idx.py
"""
Inspect a dictionary index (.idx or .idx.gz).

Usage:
  python -m dictidx.tools.dump_idx data/dictionary.idx
  python -m dictidx.tools.dump_idx data/dictionary.idx.gz --is64 --lookup cat dog
  python -m dictidx.tools.dump_idx data/dictionary.idx --dump --limit 20
"""

from __future__ import annotations
import argparse, sys
from typing import List, Optional

from dictidx.errors import IdxError
from dictidx.info import DictInfo
from dictidx.loader import read_index
from dictidx.paths import IDX_PATH


def _display(word: str) -> str:
    # keys may carry raw non-UTF-8 bytes as surrogates; make them printable
    return word.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_senses(word: str, senses) -> str:
    word = _display(word)
    if not senses:
        return f"{word}: not found"
    parts = [f"@{s.offset}+{s.size}" for s in senses]
    return f"{word}: {len(senses)} sense(s) " + " ".join(parts)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Decode a dictionary index and show its contents.")
    ap.add_argument("idx", nargs="?", default=IDX_PATH, help="Index file (.idx or .idx.gz).")
    ap.add_argument("--is64", action="store_true", help="Offsets/sizes are 64-bit (idxoffsetbits=64).")
    ap.add_argument("--lookup", nargs="+", default=[], metavar="WORD", help="Headwords to look up.")
    ap.add_argument("--dump", action="store_true", help="Print every headword with its senses.")
    ap.add_argument("--limit", type=int, default=None, help="Max headwords to print with --dump.")
    args = ap.parse_args(argv)

    try:
        store = read_index(args.idx, DictInfo(is64=args.is64))
    except IdxError as e:
        print(f"[idx] error: {e}", file=sys.stderr)
        return 2

    print(f"[idx] {args.idx} | headwords={len(store):,} senses={store.sense_count():,}")

    for word in args.lookup:
        print(format_senses(word, store.get(word)))

    if args.dump:
        for i, (word, senses) in enumerate(store.items()):
            if args.limit is not None and i >= args.limit:
                break
            print(format_senses(word, senses))
    return 0


if __name__ == "__main__":
    sys.exit(main())
