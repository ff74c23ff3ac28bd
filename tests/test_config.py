# tests/test_config.py
# JSON config and metrics persistence

import json

import pytest

from dictionary_trie.utils.config_manager import DEFAULTS, Config, ConfigError
from dictionary_trie.utils.metrics_tracker import Metrics


def test_defaults_when_no_file(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.data == DEFAULTS
    # nothing written until something changes
    assert not (tmp_path / "config.json").exists()


def test_load_merges_stored_values(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": 3, "dict_path": "words.txt"}))
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("dict_path") == "words.txt"
    assert cfg.get("log_level") == "INFO"


def test_unreadable_config_falls_back_to_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json")
    cfg = Config(str(p))
    assert cfg.data == DEFAULTS


def test_load_coerces_stored_values_and_drops_bad_ones(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({
        "max_suggestions": "lots",
        "show_frequencies": "no",
        "log_level": 3,
        "theme": "dark",
    }))
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == DEFAULTS["max_suggestions"]
    assert cfg.get("show_frequencies") is False
    assert cfg.get("log_level") == DEFAULTS["log_level"]
    assert "theme" not in cfg.data


def test_load_accepts_numeric_strings(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": "4", "show_frequencies": "true"}))
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == 4
    assert cfg.get("show_frequencies") is True


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert cfg.set("max_suggestions", "7") == 7
    assert cfg.set("show_frequencies", "yes") is True
    assert cfg.set("dict_path", "none") is None
    saved = json.loads(p.read_text())
    assert saved["max_suggestions"] == 7
    assert saved["show_frequencies"] is True


def test_set_rejects_unknown_key_and_bad_values(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(ConfigError):
        cfg.set("theme", "dark")
    with pytest.raises(ConfigError):
        cfg.set("max_suggestions", "lots")
    with pytest.raises(ConfigError):
        cfg.set("show_frequencies", "maybe")


def test_metrics_record_avg_and_reload(tmp_path):
    p = tmp_path / "metrics.json"
    m = Metrics(str(p))
    m.record("prefix_time", 0.002)
    m.record("prefix_time", 0.004)
    assert m.avg("prefix_time") == pytest.approx(0.003)
    assert m.avg("missing") == 0.0
    assert "missing" not in m.n

    again = Metrics(str(p))
    assert again.n["prefix_time"] == 2
    assert again.avg("prefix_time") == pytest.approx(0.003)


def test_metrics_ignore_corrupt_file(tmp_path):
    p = tmp_path / "metrics.json"
    p.write_text('{"x": 1}')
    m = Metrics(str(p))
    assert dict(m.m) == {}


def test_metrics_without_path_stay_in_memory():
    m = Metrics(path=None)
    m.record("load_time", 1.5)
    assert m.avg("load_time") == 1.5
