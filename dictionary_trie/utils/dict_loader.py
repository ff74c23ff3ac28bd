# dict_loader.py - reads word/frequency dictionary files into a DictionaryTrie
#
# One entry per line: an integer count and a word (internal spaces allowed).
# The count may come first ("12 ice cream") or last ("ice cream 12").
# Bad lines and rejected inserts are counted, never fatal.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from dictionary_trie.core.trie import DictionaryTrie

logger = logging.getLogger(__name__)

Entry = Tuple[str, int]


class DictionaryFileError(Exception):
    """Dictionary file is missing, unreadable or empty."""


@dataclass
class LoadReport:
    loaded: int = 0
    rejected: int = 0
    malformed: int = 0

    @property
    def total(self) -> int:
        return self.loaded + self.rejected + self.malformed


def _as_count(tok: str) -> Optional[int]:
    if tok.isdecimal():
        return int(tok)
    return None


def parse_line(line: str) -> Optional[Entry]:
    """
    Split a dictionary line into (word, freq).
    Returns None for blank lines or lines without a usable count/word.
    """
    parts = line.split()
    if len(parts) < 2:
        return None

    freq = _as_count(parts[0])
    if freq is not None:
        words = parts[1:]
    else:
        freq = _as_count(parts[-1])
        if freq is None:
            return None
        words = parts[:-1]

    return " ".join(words).lower(), freq


def check_dict_file(path: str) -> None:
    """Raise DictionaryFileError unless `path` is a readable, non-empty file."""
    if not os.path.isfile(path):
        raise DictionaryFileError(f"Invalid input file. No file was opened: {path}")
    try:
        size = os.path.getsize(path)
    except OSError as e:
        raise DictionaryFileError(f"Cannot read {path}: {e}") from e
    if size == 0:
        raise DictionaryFileError(f"The file is empty: {path}")


def load_pairs(trie: DictionaryTrie, pairs: Iterable[Entry]) -> LoadReport:
    """Insert in-memory (word, freq) pairs, counting what the trie refused."""
    report = LoadReport()
    for word, freq in pairs:
        if trie.insert(word, freq):
            report.loaded += 1
        else:
            report.rejected += 1
    return report


def load_dict(trie: DictionaryTrie, path: str) -> LoadReport:
    """
    Validate and read a dictionary file into `trie`.
    Only an unusable file raises; per-line problems end up in the report.
    """
    check_dict_file(path)

    report = LoadReport()
    try:
        # undecodable bytes become U+FFFD, which the trie then rejects like any other bad character
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, 1):
                if not line.strip():
                    continue
                entry = parse_line(line)
                if entry is None:
                    report.malformed += 1
                    logger.debug("%s:%d: unparseable line %r", path, lineno, line.rstrip("\n"))
                    continue
                if trie.insert(*entry):
                    report.loaded += 1
                else:
                    report.rejected += 1
                    logger.debug("%s:%d: rejected %r", path, lineno, entry[0])
    except OSError as e:
        raise DictionaryFileError(f"Cannot read {path}: {e}") from e

    logger.info(
        "Loaded %s words from %s (%d rejected, %d malformed)",
        f"{report.loaded:,}", path, report.rejected, report.malformed,
    )
    return report
