#!/usr/bin/env python3
"""Export the Morse symbol table in a JSON friendly format."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Iterable, Sequence

# Ensure local sources are importable when the package isn't installed.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from morse_tree_decoder import symbols


def _default_catalog() -> Iterable[symbols.SymbolEntry]:
    return sorted(symbols.iter_symbols(), key=lambda entry: (len(entry.code), entry.code))


def build_payload(catalog: Iterable[symbols.SymbolEntry]) -> dict:
    """Return a JSON serialisable payload for *catalog*."""

    return {
        "symbols": [
            {
                "character": entry.character,
                "code": entry.code,
            }
            for entry in catalog
        ]
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Export the default Morse symbol table in JSON format."
    )
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Optional file path to write. Defaults to stdout.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Number of spaces to indent JSON output (default: 2).",
    )
    parser.add_argument(
        "--tree-order",
        action="store_true",
        help="Keep depth-first tree order instead of sorting by code length.",
    )
    args = parser.parse_args(argv)

    catalog = symbols.iter_symbols() if args.tree_order else _default_catalog()
    payload = build_payload(catalog)
    json_text = json.dumps(payload, indent=args.indent, ensure_ascii=False)

    if args.output is None:
        print(json_text)
    else:
        args.output.write_text(json_text + "\n", encoding="utf-8")

    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
