# trie.py
# Multiway (27-way) trie for a frequency-ranked word dictionary.
# Supports insertion, exact lookup, ranked prefix completion and
# ranked wildcard ('_') completion.
# Node children live in a fixed 27-slot list indexed by alphabet.symbol_index.

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .alphabet import (
    ALPHABET_SIZE,
    WILDCARD,
    InvalidSymbolError,
    index_symbol,
    is_pattern,
    literal_prefix,
    symbol_index,
)
from .ranking import Candidate, matches_pattern, top_k

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the trie.
    children: 27 slots, None or the child node owning that symbol
    freq: 0 means "no word ends here", >0 is the stored occurrence count
    """

    __slots__ = ("children", "freq")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.freq = 0

    def child(self, ch: str) -> Optional[TrieNode]:
        return self.children[symbol_index(ch)]

    def is_word(self) -> bool:
        return self.freq > 0


class DictionaryTrie:
    """
    Word dictionary backed by a 27-way trie.
    Used by the CLI for:
     - exact membership checks
     - top-k prefix completions ranked by frequency
     - top-k wildcard pattern completions ("c_t" -> cat, cot, ...)
    Not thread safe: wrap the whole structure in a lock if it must be shared.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str, freq: int) -> bool:
        """
        Insert `word` with its frequency.
        Returns False when the word is empty, contains a character outside
        a-z/space, has a negative frequency, or is already stored. An existing
        word keeps its frequency; re-inserting never increments it.
        A frequency of 0 is accepted but leaves the word looking absent.
        """
        if not word:
            return False
        if freq < 0:
            logger.debug("rejecting %r: negative frequency %d", word, freq)
            return False

        # resolve every slot first so a bad character never leaves a half-built path
        try:
            slots = [symbol_index(ch) for ch in word]
        except InvalidSymbolError as e:
            logger.debug("rejecting %r: %s", word, e)
            return False

        node = self._root
        for i in slots:
            nxt = node.children[i]
            if nxt is None:
                nxt = node.children[i] = TrieNode()
            node = nxt

        if node.freq != 0:
            return False

        node.freq = freq
        if freq > 0:
            self._size += 1
        return True

    # lookup ---------------------------------------------------------
    def find(self, word: str) -> bool:
        """True if `word` is stored with a nonzero frequency."""
        node = self._walk(word)
        return node is not None and node.is_word()

    def frequency(self, word: str) -> int:
        """Stored frequency of `word`, 0 if it is absent."""
        node = self._walk(word)
        return node.freq if node is not None else 0

    def _walk(self, s: str) -> Optional[TrieNode]:
        """Follow `s` from the root; None if empty, unsupported or missing."""
        if not s:
            return None
        node = self._root
        try:
            for ch in s:
                node = node.child(ch)
                if node is None:
                    return None
        except InvalidSymbolError:
            return None
        return node

    # completion -----------------------------------------------------
    def predict_completions(self, prefix: str, k: int) -> List[str]:
        """
        Return up to `k` stored words starting with `prefix`, sorted by
         - higher freq first
         - lexicographically second
        Empty prefix, k == 0 or an unknown prefix all give [].
        """
        if not prefix or k <= 0:
            return []

        node = self._walk(prefix)
        if node is None:
            return []

        return [w for w, _ in top_k(self._collect(node, prefix), k)]

    def predict_underscores(self, pattern: str, k: int) -> List[str]:
        """
        Return up to `k` stored words matching `pattern`, where '_' stands for
        any single letter or space. Ranked like predict_completions.

        The search starts below the literal prefix in front of the first '_'
        and scans that whole subtree; every wildcard after it (there may be
        several) is handled by the filter. A pattern without '_' only matches
        itself, an all-wildcard pattern scans the whole dictionary.
        """
        if not pattern or k <= 0:
            return []
        if not is_pattern(pattern):
            return []

        head = literal_prefix(pattern)
        if head:
            node = self._walk(head)
            if node is None:
                return []
        else:
            node = self._root

        start = len(head)
        hits = (
            cand
            for cand in self._collect(node, head)
            if matches_pattern(cand[0], pattern, start)
        )
        return [w for w, _ in top_k(hits, k)]

    def complete(self, query: str, k: int) -> List[str]:
        """Route a query: patterns holding '_' go to predict_underscores."""
        if WILDCARD in query:
            return self.predict_underscores(query, k)
        return self.predict_completions(query, k)

    # camelCase aliases
    predictCompletions = predict_completions
    predictUnderscores = predict_underscores

    # internal breadth-first collector -------------------------------
    def _collect(self, node: TrieNode, path: str) -> Iterator[Candidate]:
        """BFS over the subtree at `node`, yielding (word, freq) for word nodes."""
        queue = deque([(path, node)])
        while queue:
            acc, cur = queue.popleft()
            if cur.freq > 0:
                yield (acc, cur.freq)
            for i, child in enumerate(cur.children):
                if child is not None:
                    queue.append((acc + index_symbol(i), child))

    # convenience -----------------------------------------------------
    def words(self) -> List[Tuple[str, int]]:
        """All stored (word, freq) pairs, best ranked first."""
        return top_k(self._collect(self._root, ""), self._size)

    def clear(self) -> None:
        """Drop every node; the old subtree is released with its root."""
        self._root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.find(word)
