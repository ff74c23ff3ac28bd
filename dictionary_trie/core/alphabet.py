# alphabet.py
# Symbol <-> slot mapping for the 27-way trie.
# Slots 0..25 are 'a'..'z', slot 26 is the space character.
# The wildcard '_' is only meaningful inside query patterns and never gets a slot.

from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyz "
ALPHABET_SIZE = len(ALPHABET)
SPACE_INDEX = ALPHABET_SIZE - 1
WILDCARD = "_"


class InvalidSymbolError(ValueError):
    """Raised when a character has no slot in the trie alphabet."""

    def __init__(self, ch: str) -> None:
        super().__init__(f"unsupported character: {ch!r} (use a-z or space)")
        self.ch = ch


def symbol_index(ch: str) -> int:
    """Map a single character to its child slot."""
    if ch == " ":
        return SPACE_INDEX
    if len(ch) == 1 and "a" <= ch <= "z":
        return ord(ch) - ord("a")
    raise InvalidSymbolError(ch)


def index_symbol(i: int) -> str:
    if not 0 <= i < ALPHABET_SIZE:
        raise InvalidSymbolError(str(i))
    return ALPHABET[i]


def is_pattern(pattern: str) -> bool:
    """True when `pattern` only holds alphabet symbols and wildcards."""
    return bool(pattern) and all(ch in ALPHABET or ch == WILDCARD for ch in pattern)


def literal_prefix(pattern: str) -> str:
    """Part of `pattern` before its first wildcard (all of it if there is none)."""
    cut = pattern.find(WILDCARD)
    return pattern if cut < 0 else pattern[:cut]
