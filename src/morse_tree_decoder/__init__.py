"""Decode Morse code text through a binary symbol tree.

The :func:`~morse_tree_decoder.decoder.decode_message` function is the main
entry point and can be imported directly::

    from morse_tree_decoder import decode_message

    decode_message("... --- ...")  # "SOS"

Additional characters can be registered by building a custom tree with
:func:`~morse_tree_decoder.symbols.build_tree` and passing it to
:class:`~morse_tree_decoder.decoder.MorseDecoder`.
"""

from __future__ import annotations

from .decoder import (
    PLACEHOLDER,
    MorseDecoder,
    Token,
    TokenKind,
    decode_message,
    normalise_text,
    prepare_tokens,
    tokenize,
)
from .symbol_tree import (
    DuplicateCodeError,
    InvalidCodeError,
    SymbolTree,
    SymbolTreeError,
    SymbolTreeFrozenError,
    TreeNode,
)
from .symbols import (
    DEFAULT_SYMBOL_TABLE,
    SymbolEntry,
    SymbolTableError,
    build_tree,
    default_tree,
    iter_symbols,
    load_symbol_file,
)
from .viewer import SymbolTableViewer

__all__ = [
    "DEFAULT_SYMBOL_TABLE",
    "DuplicateCodeError",
    "InvalidCodeError",
    "MorseDecoder",
    "PLACEHOLDER",
    "SymbolEntry",
    "SymbolTableError",
    "SymbolTableViewer",
    "SymbolTree",
    "SymbolTreeError",
    "SymbolTreeFrozenError",
    "Token",
    "TokenKind",
    "TreeNode",
    "build_tree",
    "decode_message",
    "default_tree",
    "iter_symbols",
    "load_symbol_file",
    "normalise_text",
    "prepare_tokens",
    "tokenize",
]

__version__ = "0.1.0"
