"""Default Morse symbol table and helpers for building lookup trees from it."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from .symbol_tree import SymbolTree

LOGGER = logging.getLogger(__name__)


class SymbolTableError(ValueError):
    """Raised when a symbol table file cannot be parsed."""


@dataclass(frozen=True)
class SymbolEntry:
    """A character together with the Morse code that spells it."""

    character: str
    code: str


DEFAULT_SYMBOL_TABLE: Mapping[str, str] = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    ".": ".-.-.-",
    ",": "--..--",
    "?": "..--..",
    "!": "-.-.--",
    "/": "-..-.",
    "(": "-.--.",
    ")": "-.--.-",
    "&": ".-...",
    ":": "---...",
    ";": "-.-.-.",
    "=": "-...-",
    "+": ".-.-.",
    "-": "-....-",
    "_": "..--.-",
    '"': ".-..-.",
    "$": "...-..-",
    "@": ".--.-.",
}


def build_tree(
    table: Optional[Mapping[str, str]] = None,
    *,
    extra: Optional[Mapping[str, str]] = None,
    replace: bool = False,
) -> SymbolTree:
    """Return a new, unfrozen tree populated from *table* and *extra*.

    Construction errors propagate unchanged; a table with a malformed code is
    a programming mistake and must not produce a partially filled tree.
    """

    tree = SymbolTree()
    source = DEFAULT_SYMBOL_TABLE if table is None else table
    for character, code in source.items():
        tree.insert(character, code)
    if extra:
        for character, code in extra.items():
            tree.insert(character, code, replace=replace)
    LOGGER.debug("Built symbol tree with %d symbols (depth %d)", len(tree), tree.depth)
    return tree


@lru_cache(maxsize=1)
def default_tree() -> SymbolTree:
    """Return the shared, read-only tree for :data:`DEFAULT_SYMBOL_TABLE`."""

    return build_tree().freeze()


def iter_symbols(tree: Optional[SymbolTree] = None) -> Iterator[SymbolEntry]:
    """Yield the entries stored in *tree* (the default tree when omitted)."""

    source = tree if tree is not None else default_tree()
    for character, code in source.iter_entries():
        yield SymbolEntry(character=character, code=code)


def load_symbol_file(path: str | Path) -> Dict[str, str]:
    """Load a JSON object mapping single characters to Morse codes."""

    file_path = Path(path)
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SymbolTableError(f"Symbol file {file_path} is not valid JSON: {exc.msg}.") from exc

    if not isinstance(payload, dict):
        raise SymbolTableError(f"Symbol file {file_path} must contain a JSON object.")

    table: Dict[str, str] = {}
    for character, code in payload.items():
        if len(character) != 1:
            raise SymbolTableError(f"Symbol keys must be single characters, got {character!r}.")
        if not isinstance(code, str):
            raise SymbolTableError(f"Code for {character!r} must be a string.")
        table[character] = code
    return table


__all__ = [
    "DEFAULT_SYMBOL_TABLE",
    "SymbolEntry",
    "SymbolTableError",
    "build_tree",
    "default_tree",
    "iter_symbols",
    "load_symbol_file",
]
