"""Helpers for browsing the symbols registered in a Morse lookup tree."""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, List, Optional, Sequence

from .symbols import SymbolEntry, iter_symbols

LOGGER = logging.getLogger(__name__)

CATEGORIES = ("letter", "digit", "punctuation")


def _format_table(rows: Sequence[Sequence[str]]) -> str:
    if not rows:
        return ""
    widths = [max(len(row[index]) for row in rows) for index in range(len(rows[0]))]
    lines = []
    for index, row in enumerate(rows):
        padded = [value.ljust(widths[pos]) for pos, value in enumerate(row)]
        lines.append(" | ".join(padded).rstrip())
        if index == 0:
            lines.append("-+-".join("-" * width for width in widths))
    return "\n".join(lines)


def categorise(character: str) -> str:
    if character.isalpha():
        return "letter"
    if character.isdigit():
        return "digit"
    return "punctuation"


class SymbolTableViewer:
    """Filter and render symbol table entries as a plain text table."""

    def __init__(self, entries: Optional[Iterable[SymbolEntry]] = None) -> None:
        self._entries = list(entries) if entries is not None else list(iter_symbols())

    def search(self, *, category: Optional[str] = None, query: Optional[str] = None) -> List[SymbolEntry]:
        if category is not None and category not in CATEGORIES:
            raise ValueError(f"Unknown category {category!r}; expected one of {', '.join(CATEGORIES)}")
        results: List[SymbolEntry] = []
        for entry in self._entries:
            if category and categorise(entry.character) != category:
                continue
            if query and query.upper() != entry.character.upper() and query != entry.code:
                continue
            results.append(entry)
        return results

    def render(self, entries: Sequence[SymbolEntry]) -> str:
        rows = [("Char", "Code")]
        for entry in sorted(entries, key=lambda item: (len(item.code), item.code)):
            rows.append((entry.character, entry.code))
        return _format_table(rows)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="morse-symbols", description="List the default Morse symbol table")
    parser.add_argument("--category", choices=CATEGORIES, default=None, help="Filter by character class")
    parser.add_argument("--search", default=None, help="Show only the given character or code")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    viewer = SymbolTableViewer()
    print(viewer.render(viewer.search(category=args.category, query=args.search)))
    return 0


__all__ = ["CATEGORIES", "SymbolTableViewer", "categorise", "main"]
