"""
cli.py - interactive dictionary completion
Features:
- Loads a word/frequency dictionary file into a DictionaryTrie
- Prompts for a prefix or a '_' pattern and a number of completions
- Prints ranked completions one per line
- Slash commands for lookup, insertion, config and timing stats
- Uses Rich for prompts, tables and formatting
"""

import argparse
import logging
import shlex
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt
from rich.table import Table
from rich import box

from dictionary_trie.core.alphabet import WILDCARD
from dictionary_trie.core.trie import DictionaryTrie
from dictionary_trie.utils.config_manager import Config, ConfigError
from dictionary_trie.utils.dict_loader import DictionaryFileError, LoadReport, load_dict
from dictionary_trie.utils.logger_utils import Log, setup_logging
from dictionary_trie.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)

HELP = """\
Commands (at the prefix prompt):
  /find <word>          check whether a word is stored
  /insert <freq> <word> add a word (words may contain spaces)
  /stats                show timing stats
  /config [key val]     show or change settings
  /help                 this text
  /quit                 leave
Patterns: use '_' for any single letter or space, e.g. c_t"""


class CLI:
    """Read-eval loop over a loaded DictionaryTrie."""

    def __init__(self, trie: DictionaryTrie, cfg: Config, metrics: Metrics = None,
                 console: Console = None, stream=None):
        """
        stream: optional text stream to read answers from instead of stdin
        (handy for scripted sessions and tests).
        """
        self.trie = trie
        self.cfg = cfg
        self.metrics = metrics or Metrics(path=cfg.get("metrics_path"))
        self.console = console or Console()
        self.stream = stream
        self.running = True

    def run(self):
        """
        Main loop:
        - ask for a prefix/pattern (or a /command)
        - ask how many completions to show
        - print them, then ask whether to continue
        """
        while self.running:
            try:
                query = self._ask_query()
                if query.startswith("/"):
                    self._handle_command(query)
                    continue

                count = IntPrompt.ask(
                    "Enter a number of completions",
                    console=self.console,
                    default=self.cfg.get("max_suggestions"),
                    stream=self.stream,
                )
                self._show(self.query(query, count))

                if not Confirm.ask("Continue?", console=self.console,
                                   default=False, stream=self.stream):
                    self.running = False
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.running = False

    def _ask_query(self) -> str:
        # prefixes may legitimately end in a space, so only strip the newline
        line = self.console.input("Enter a prefix/pattern to search for: ", stream=self.stream)
        return line.rstrip("\r\n").lower()

    # QUERIES -------------------------------------------------------------------
    def query(self, text: str, count: int) -> List[str]:
        """Route to pattern or prefix completion and record the latency."""
        kind = "pattern" if WILDCARD in text else "prefix"
        with Log.time_block(f"{kind}_query") as t:
            out = self.trie.complete(text, count)
        self.metrics.record(f"{kind}_time", t.elapsed)
        logger.debug("%s %r k=%d -> %d results", kind, text, count, len(out))
        return out

    def _show(self, words: List[str]):
        if not words:
            self.console.print("[dim](no completions)[/dim]")
            return
        with_freq = self.cfg.get("show_frequencies")
        for w in words:
            if with_freq:
                self.console.print(f"{w}\t{self.trie.frequency(w)}", markup=False, highlight=False)
            else:
                self.console.print(w, markup=False, highlight=False)

    # COMMAND HANDLING ----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {escape(str(e))}")
            return
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if c == "/help":
            self.console.print(HELP, markup=False, highlight=False)
            return

        if c == "/find" and len(p) > 1:
            word = " ".join(p[1:])
            if self.trie.find(word):
                self.console.print(f"[green]found[/green] {escape(repr(word))} (freq {self.trie.frequency(word)})")
            else:
                self.console.print(f"[yellow]not found[/yellow] {escape(repr(word))}")
            return

        if c == "/insert" and len(p) > 2:
            self._insert(p[1], " ".join(p[2:]))
            return

        if c == "/stats":
            self._show_stats()
            return

        if c == "/config":
            if len(p) == 1:
                self.cfg.show(self.console)
            elif len(p) == 3:
                try:
                    val = self.cfg.set(p[1], p[2])
                    self.console.print(f"{p[1]} = {val}")
                except ConfigError as e:
                    self.console.print(f"[red]{escape(str(e))}[/red]")
            else:
                self.console.print("usage: /config [key val]")
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _insert(self, freq_text: str, word: str):
        try:
            freq = int(freq_text)
        except ValueError:
            self.console.print("usage: /insert <freq> <word>")
            return
        if self.trie.insert(word.lower(), freq):
            self.console.print(f"[cyan]Added:[/cyan] {word.lower()} ({freq})")
        else:
            self.console.print(f"[yellow]Not added:[/yellow] {escape(repr(word))} (empty, unsupported, or already stored)")

    def _show_stats(self):
        table = Table(title="Dictionary", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        table.add_row("Words stored", f"{len(self.trie):,}")
        self.console.print(table)
        self.metrics.show(self.console)


def _print_report(console: Console, report: LoadReport, seconds: float):
    console.print(
        f"[green]Loaded {report.loaded:,} words[/green] in {seconds:.2f}s"
        f"  [dim]({report.rejected} rejected, {report.malformed} malformed)[/dim]"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dictionary-trie",
        description="Prefix and wildcard completion over a word/frequency dictionary.",
    )
    parser.add_argument("dict_path", nargs="?", help="dictionary file, one '<freq> <word>' per line")
    parser.add_argument("--config", default="config.json", help="path to the JSON config")
    parser.add_argument("--count", type=int, default=None, help="default number of completions")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", default=None, help="where to write the log")
    return parser


def main(argv: Optional[List[str]] = None, console: Console = None, stream=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    # --count overrides the configured default for this session
    if args.count is not None:
        cfg.data["max_suggestions"] = args.count

    dict_path = args.dict_path or cfg.get("dict_path")
    if not dict_path:
        parser.error("a dictionary file is required (argument or dict_path in config)")

    setup_logging(args.log_file or cfg.get("log_path"), args.log_level or cfg.get("log_level", "INFO"))
    console = console or Console()

    trie = DictionaryTrie()
    metrics = Metrics(path=cfg.get("metrics_path"))
    console.print(f"Reading file: {dict_path}", markup=False, highlight=False)
    try:
        with Log.time_block("load_dict") as t:
            report = load_dict(trie, dict_path)
    except DictionaryFileError as e:
        logger.error("%s", e)
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    metrics.record("load_time", t.elapsed)
    _print_report(console, report, t.elapsed)

    CLI(trie, cfg, metrics=metrics, console=console, stream=stream).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
