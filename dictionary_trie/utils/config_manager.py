# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table
from rich import box

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 10,  # completions asked for when the user just hits enter
    "dict_path": None,
    "log_path": os.path.join("logs", "dictionary_trie.log"),
    "log_level": "INFO",
    "show_frequencies": False,
    "metrics_path": "metrics.json",
}


class ConfigError(ValueError):
    """Unknown key or a value that cannot be converted."""


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(stored, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.path)
            return
        for key, val in stored.items():
            if key not in DEFAULTS:
                logger.warning("Ignoring unknown config option %r in %s", key, self.path)
                continue
            try:
                self.data[key] = _coerce(DEFAULTS[key], val)
            except ConfigError as e:
                logger.warning("Ignoring config option %r in %s: %s", key, self.path, e)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self, console=None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        console.print(table)

    def set(self, key, val):
        """Set `key` from a string, converted to the default's type."""
        if key not in DEFAULTS:
            raise ConfigError(f"No such option: {key}")
        self.data[key] = _coerce(DEFAULTS[key], val)
        if self.autosave:
            self.save()
        return self.data[key]


def _coerce(default, val):
    """Convert `val` to the type of `default`; raise ConfigError if it doesn't fit."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        low = str(val).strip().lower()
        if low in ("1", "true", "yes", "on"):
            return True
        if low in ("0", "false", "no", "off"):
            return False
        raise ConfigError(f"Expected a boolean, got {val!r}")
    if isinstance(default, int):
        if isinstance(val, int) and not isinstance(val, bool):
            return val
        if isinstance(val, str):
            try:
                return int(val)
            except ValueError:
                pass
        raise ConfigError(f"Expected an integer, got {val!r}")
    if val is None:
        return None
    if not isinstance(val, str):
        raise ConfigError(f"Expected a string, got {val!r}")
    if default is None and val.lower() in ("", "none", "null"):
        return None
    return val
