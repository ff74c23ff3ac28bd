# dictionary_trie/utils/__init__.py
# dictionary file loading plus the config, logging and metrics helpers used by the CLI

from .config_manager import Config, ConfigError
from .dict_loader import DictionaryFileError, LoadReport, check_dict_file, load_dict, load_pairs, parse_line
from .logger_utils import Log, setup_logging
from .metrics_tracker import Metrics

__all__ = [
    "Config",
    "ConfigError",
    "DictionaryFileError",
    "LoadReport",
    "Log",
    "Metrics",
    "check_dict_file",
    "load_dict",
    "load_pairs",
    "parse_line",
    "setup_logging",
]
