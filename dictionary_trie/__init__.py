"""
dictionary_trie

Frequency-ranked word dictionary with prefix and wildcard completion.
Contains:
 - core: the 27-way trie and its ranking helpers
 - utils: dictionary file loading, config, logging and metrics
 - cli: the interactive read-eval loop
"""

from .core import DictionaryTrie, TrieNode
from .utils.dict_loader import DictionaryFileError, LoadReport, load_dict, load_pairs

__all__ = [
    "DictionaryTrie",
    "TrieNode",
    "DictionaryFileError",
    "LoadReport",
    "load_dict",
    "load_pairs",
]

__version__ = "0.1.0"
