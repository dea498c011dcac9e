"""Binary lookup tree for resolving Morse code sequences to characters."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

LOGGER = logging.getLogger(__name__)

DOT = "."
DASH = "-"
PATH_ALPHABET = frozenset((DOT, DASH))


class SymbolTreeError(ValueError):
    """Base class for errors raised while building a :class:`SymbolTree`."""


class InvalidCodeError(SymbolTreeError):
    """Raised when a code is empty or contains symbols other than dot and dash."""


class DuplicateCodeError(SymbolTreeError):
    """Raised when a different character already occupies the requested code."""


class SymbolTreeFrozenError(SymbolTreeError):
    """Raised when inserting into a tree that has been frozen for lookups."""


class TreeNode:
    """Single node in the symbol tree."""

    __slots__ = ("character", "dot", "dash")

    def __init__(self) -> None:
        self.character: Optional[str] = None
        self.dot: Optional[TreeNode] = None
        self.dash: Optional[TreeNode] = None

    def child(self, symbol: str) -> Optional[TreeNode]:
        if symbol == DOT:
            return self.dot
        if symbol == DASH:
            return self.dash
        return None

    def ensure_child(self, symbol: str) -> TreeNode:
        if symbol == DOT:
            if self.dot is None:
                self.dot = TreeNode()
            return self.dot
        if self.dash is None:
            self.dash = TreeNode()
        return self.dash


def _validate_code(code: str) -> None:
    if not code:
        raise InvalidCodeError("Morse codes must contain at least one symbol.")
    invalid = sorted(set(code) - PATH_ALPHABET)
    if invalid:
        raise InvalidCodeError(
            f"Morse code {code!r} contains unsupported symbols {''.join(invalid)!r}; "
            "only '.' and '-' are allowed."
        )


class SymbolTree:
    """Binary trie keyed by dot and dash.

    Every inserted code describes one path from the root; the node at the end
    of that path stores the decoded character.  Lookups walk the same path and
    report ``None`` whenever the walk leaves the tree or ends on an internal
    node.  Call :meth:`freeze` once construction is complete to guard the tree
    against further mutation while it is shared between callers.
    """

    def __init__(self) -> None:
        self.root = TreeNode()
        self._size = 0
        self._depth = 0
        self._frozen = False

    def insert(self, character: str, code: str, *, replace: bool = False) -> None:
        """Store *character* at the node addressed by *code*."""

        if self._frozen:
            raise SymbolTreeFrozenError("Symbol tree is frozen; build a new tree to add symbols.")
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}.")
        _validate_code(code)

        node = self.root
        for symbol in code:
            node = node.ensure_child(symbol)

        if node.character is None:
            self._size += 1
        elif node.character != character:
            if not replace:
                raise DuplicateCodeError(
                    f"Code {code!r} is already assigned to {node.character!r}; "
                    f"refusing to store {character!r}."
                )
            LOGGER.debug("Replacing %r with %r at %s", node.character, character, code)
        node.character = character
        self._depth = max(self._depth, len(code))

    def lookup(self, token: str) -> Optional[str]:
        """Return the character stored for *token* or ``None`` when unresolved."""

        if not token:
            return None
        node: Optional[TreeNode] = self.root
        for symbol in token:
            node = node.child(symbol)
            if node is None:
                return None
        return node.character

    def freeze(self) -> "SymbolTree":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def depth(self) -> int:
        """Length of the longest stored code."""

        return self._depth

    def iter_entries(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(character, code)`` pairs, dot branches before dash branches."""

        stack: List[Tuple[TreeNode, str]] = [(self.root, "")]
        while stack:
            node, code = stack.pop()
            if node.character is not None:
                yield node.character, code
            if node.dash is not None:
                stack.append((node.dash, code + DASH))
            if node.dot is not None:
                stack.append((node.dot, code + DOT))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def __len__(self) -> int:
        return self._size


__all__ = [
    "DASH",
    "DOT",
    "DuplicateCodeError",
    "InvalidCodeError",
    "PATH_ALPHABET",
    "SymbolTree",
    "SymbolTreeError",
    "SymbolTreeFrozenError",
    "TreeNode",
]
