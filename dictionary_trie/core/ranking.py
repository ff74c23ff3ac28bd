# ranking.py
# Top-k selection over (word, freq) candidates.
# Order is total: higher frequency first, then lexicographically smaller word.

from __future__ import annotations

import heapq
from typing import Iterable, List, Tuple

from .alphabet import WILDCARD

Word = str
Freq = int
Candidate = Tuple[Word, Freq]


def rank_key(candidate: Candidate) -> Tuple[int, str]:
    word, freq = candidate
    return (-freq, word)


def top_k(candidates: Iterable[Candidate], k: int) -> List[Candidate]:
    """
    Return the min(k, n) best candidates, best first.
    heapq.nsmallest keeps only k items around, so big subtrees stay cheap
    when only a handful of completions are requested.
    """
    if k <= 0:
        return []
    return heapq.nsmallest(k, candidates, key=rank_key)


def matches_pattern(word: str, pattern: str, start: int = 0) -> bool:
    """
    Check `word` against a wildcard pattern.
    Lengths must agree; from `start` on, every pattern position is either the
    wildcard or the same character. Positions before `start` are assumed to
    match already (they were consumed by the prefix walk).
    """
    if len(word) != len(pattern):
        return False
    for i in range(start, len(pattern)):
        p = pattern[i]
        if p != WILDCARD and p != word[i]:
            return False
    return True
