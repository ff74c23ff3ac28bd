# logger_utils.py - log file setup plus small helpers for metrics and timings

import logging
import os
import time

LOGGER_NAME = "dictionary_trie"

# Default log file, can be overridden through the config's log_path
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "dictionary_trie.log")

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_metrics_log = logging.getLogger(LOGGER_NAME + ".metrics")


def setup_logging(path: str = None, level: str = "INFO") -> logging.Handler:
    """
    Send the package's log records to a file.
    Library modules only call logging.getLogger(__name__); the CLI calls this
    once at startup. Calling it again replaces the previous file handler.
    """
    path = path or DEFAULT_LOG_PATH
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)  # Create the folder if it doesn't already exist

    pkg = logging.getLogger(LOGGER_NAME)
    for h in list(pkg.handlers):
        if getattr(h, "_dictionary_trie", False):
            pkg.removeHandler(h)
            h.close()

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler._dictionary_trie = True
    pkg.addHandler(handler)
    pkg.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return handler


class Log:
    """Lightweight helpers for recording metrics next to the regular log."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts, ...) in the log.
        Example line: ... | dictionary_trie.metrics | load done: 0.123s
        """
        _metrics_log.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Time a trie load or query and log "<label> done: <seconds>s" on exit.
        The returned timer keeps the duration in `.elapsed` so callers can
        also feed it to Metrics:
            with Log.time_block("prefix_query") as t:
                trie.complete("ca", 5)
            metrics.record("prefix_time", t.elapsed)
        """
        return _Timer(label)


class _Timer:
    """perf_counter stopwatch behind Log.time_block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record the block's duration as a metric; exceptions propagate."""
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
        return False
