"""
dictionary_trie.core

The data structure behind the dictionary:
 - alphabet mapping for the 27-way trie (a-z plus space, '_' as wildcard)
 - DictionaryTrie with insert/find and ranked prefix + wildcard completion
 - top-k ranking helpers (frequency descending, lexicographic ties)
"""

from .alphabet import ALPHABET, ALPHABET_SIZE, WILDCARD, InvalidSymbolError, symbol_index
from .ranking import Candidate, matches_pattern, rank_key, top_k
from .trie import DictionaryTrie, TrieNode

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "WILDCARD",
    "Candidate",
    "DictionaryTrie",
    "InvalidSymbolError",
    "TrieNode",
    "matches_pattern",
    "rank_key",
    "symbol_index",
    "top_k",
]
