# dictionary_trie/cli/__init__.py
# interactive read-eval loop over a loaded dictionary

from .cli import CLI, build_parser, main

__all__ = ["CLI", "build_parser", "main"]
