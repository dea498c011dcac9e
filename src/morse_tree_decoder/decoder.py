"""Turn free-form Morse text into decoded characters.

Decoding is a chain of small, pure string transformations:

1. :func:`normalise_text` folds typographic look-alikes (ellipsis, long
   dashes, bullets) into ``.`` and ``-`` and drops everything that is not a
   dot, dash, slash or whitespace.
2. :func:`fold_word_boundaries` turns long blank runs into the ``" / "`` word
   separator before they can be mistaken for ordinary letter gaps.
3. :func:`collapse_whitespace` squeezes the remaining gaps to one space.
4. :func:`tokenize` splits the result into letter and separator tokens.
5. :class:`MorseDecoder` resolves letter tokens through a
   :class:`~morse_tree_decoder.symbol_tree.SymbolTree`, substituting
   :data:`PLACEHOLDER` for anything it cannot resolve.

None of the steps raise for user input; malformed Morse degrades to
placeholder characters instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
import logging
import re
from typing import Iterable, List, Optional

from .symbol_tree import SymbolTree
from .symbols import default_tree

LOGGER = logging.getLogger(__name__)

PLACEHOLDER = "?"
SEPARATOR_SYMBOL = "/"
WORD_SEPARATOR = f" {SEPARATOR_SYMBOL} "

_VARIANT_TRANSLATION = str.maketrans(
    {
        "…": "...",  # HORIZONTAL ELLIPSIS
        "‒": "-",  # FIGURE DASH
        "–": "-",  # EN DASH
        "—": "-",  # EM DASH
        "―": "-",  # HORIZONTAL BAR
        "−": "-",  # MINUS SIGN
        "_": "-",
        "·": ".",  # MIDDLE DOT
        "•": ".",  # BULLET
        "․": ".",  # ONE DOT LEADER
        "∙": ".",  # BULLET OPERATOR
        "⋅": ".",  # DOT OPERATOR
    }
)

_DISALLOWED_PATTERN = re.compile(r"[^.\-/\s]")
_WORD_GAP_PATTERN = re.compile(r"\s{3,}")
_WHITESPACE_PATTERN = re.compile(r"\s+")


class TokenKind(str, Enum):
    """Classification of a token produced by :func:`tokenize`."""

    LETTER = "letter"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR


def normalise_text(raw_text: str) -> str:
    """Map decorative variants to ``.``/``-`` and drop every other symbol."""

    translated = raw_text.translate(_VARIANT_TRANSLATION)
    cleaned = _DISALLOWED_PATTERN.sub("", translated)
    if LOGGER.isEnabledFor(logging.DEBUG) and len(cleaned) != len(translated):
        LOGGER.debug("Dropped %d unsupported characters", len(translated) - len(cleaned))
    return cleaned


def fold_word_boundaries(text: str) -> str:
    return _WORD_GAP_PATTERN.sub(WORD_SEPARATOR, text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def tokenize(text: str) -> List[Token]:
    """Split collapsed Morse *text* on single spaces.

    Empty fragments are skipped.  A fragment consisting solely of ``/`` is a
    word separator; everything else is handed on as a letter token, even when
    it contains stray slashes, so that lookup can reject it as a whole.
    """

    tokens: List[Token] = []
    for fragment in text.split(" "):
        if not fragment:
            continue
        if fragment == SEPARATOR_SYMBOL:
            tokens.append(Token(TokenKind.SEPARATOR, fragment))
        else:
            tokens.append(Token(TokenKind.LETTER, fragment))
    return tokens


def prepare_tokens(raw_text: str) -> List[Token]:
    """Run the normalisation steps and return the resulting tokens.

    Blank runs at either end of the message are trimmed before folding so
    that only gaps between symbols can become word separators.
    """

    normalised = normalise_text(raw_text).strip()
    return tokenize(collapse_whitespace(fold_word_boundaries(normalised)))


class MorseDecoder:
    """Resolve Morse text against a particular :class:`SymbolTree`."""

    def __init__(self, tree: Optional[SymbolTree] = None, *, placeholder: str = PLACEHOLDER) -> None:
        if not placeholder:
            raise ValueError("Placeholder must be a non-empty string.")
        self.tree = tree if tree is not None else default_tree()
        self.placeholder = placeholder

    def resolve(self, token: Token) -> str:
        if token.is_separator:
            return " "
        character = self.tree.lookup(token.text)
        if character is None:
            LOGGER.debug("No symbol for token %r", token.text)
            return self.placeholder
        return character

    def decode_tokens(self, tokens: Iterable[Token]) -> str:
        return "".join(self.resolve(token) for token in tokens)

    def decode(self, raw_text: str) -> str:
        return self.decode_tokens(prepare_tokens(raw_text))


@lru_cache(maxsize=1)
def _default_decoder() -> MorseDecoder:
    return MorseDecoder()


def decode_message(raw_text: str, tree: Optional[SymbolTree] = None) -> str:
    """Decode *raw_text* using *tree* (the default symbol table when omitted)."""

    decoder = _default_decoder() if tree is None else MorseDecoder(tree)
    return decoder.decode(raw_text)


__all__ = [
    "MorseDecoder",
    "PLACEHOLDER",
    "SEPARATOR_SYMBOL",
    "Token",
    "TokenKind",
    "WORD_SEPARATOR",
    "collapse_whitespace",
    "decode_message",
    "fold_word_boundaries",
    "normalise_text",
    "prepare_tokens",
    "tokenize",
]
