# metrics_tracker.py - running sums/counts for query and load timings

import json
import logging
import os
from collections import defaultdict

from rich.console import Console
from rich.table import Table
from rich import box

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path="metrics.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable metrics file %s: %s", self.path, e)
            self.m.clear()
            self.n.clear()

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1
        if self.autosave:
            self.save()

    def avg(self, key):
        """Mean recorded value for `key` (seconds for the *_time keys), 0.0 if unseen."""
        count = self.n.get(key, 0)
        return self.m[key] / count if count else 0.0

    def show(self, console=None):
        console = console or Console()
        table = Table(title="Metrics", box=box.SIMPLE)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Avg (ms)", justify="right", style="magenta")
        for k in sorted(self.m):
            table.add_row(k, str(self.n[k]), f"{self.avg(k) * 1000:.3f}")
        console.print(table)
