# main.py - run the interactive dictionary completion CLI
# usage: python main.py <dictionary file> [--count N] [--config config.json]

from dictionary_trie.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
