# tests/test_cli.py
# scripted CLI sessions: answers come from a text stream, output goes to a buffer

import io
import json
import re

import pytest
from rich.console import Console

from dictionary_trie.cli import main

DICT = "5 cat\n3 car\n3 cap\n2 cot\n1 cup\n9 ice cream\n"


@pytest.fixture
def dict_file(tmp_path, monkeypatch):
    # keep config.json, metrics.json and logs/ inside the temp dir
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "freq_dict.txt"
    p.write_text(DICT, encoding="utf-8")
    return str(p)


def run_cli(argv, answers):
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    code = main(argv, console=console, stream=io.StringIO(answers))
    return code, buf.getvalue()


def test_prefix_then_pattern_session(dict_file):
    code, out = run_cli([dict_file], "ca\n2\ny\nc_t\n5\nn\n")
    assert code == 0
    assert f"Reading file: {dict_file}" in out
    assert "Loaded 6 words" in out
    assert "cat\ncap\n" in out
    assert "car" not in out.split("cat\ncap\n", 1)[1].split("Continue?", 1)[0]
    assert "cat\ncot\n" in out
    assert "cup" not in out


def test_no_results_is_not_an_error(dict_file):
    code, out = run_cli([dict_file], "zzz\n3\nn\n")
    assert code == 0
    assert "(no completions)" in out


def test_default_count_comes_from_option(dict_file):
    # end of input: count falls back to --count, continue falls back to "no"
    code, out = run_cli([dict_file, "--count", "1"], "ca\n")
    assert code == 0
    assert "cat\n" in out
    assert "cap\n" not in out


def test_find_and_insert_commands(dict_file):
    code, out = run_cli([dict_file], "/find cat\n/find dog\n/insert 50 cab\nca\n1\nn\n")
    assert code == 0
    assert "found 'cat' (freq 5)" in out
    assert "not found 'dog'" in out
    assert "Added: cab (50)" in out
    assert "cab\n" in out


def test_config_command_shows_frequencies(dict_file, tmp_path):
    code, out = run_cli([dict_file], "/config show_frequencies yes\nice\n1\nn\n")
    assert code == 0
    assert "show_frequencies = True" in out
    assert re.search(r"ice cream\s+9", out)
    assert (tmp_path / "config.json").exists()


def test_bad_stored_config_falls_back_to_defaults(dict_file, tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"max_suggestions": "lots", "show_frequencies": "no"})
    )
    # blank count line then end of input: count uses the default of 10
    code, out = run_cli([dict_file], "ca\n\nn\n")
    assert code == 0
    assert "cat\ncap\ncar\n" in out
    assert not re.search(r"cat\s+5", out)


def test_unknown_command_and_quit(dict_file):
    code, out = run_cli([dict_file], "/bogus\n/quit\n")
    assert code == 0
    assert "Unknown command: /bogus" in out


def test_stats_command(dict_file):
    code, out = run_cli([dict_file], "ca\n2\ny\n/stats\n/quit\n")
    assert code == 0
    assert "Words stored" in out
    assert "prefix_time" in out


def test_missing_dictionary_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code, out = run_cli([str(tmp_path / "missing.txt")], "")
    assert code == 1
    assert "No file was opened" in out


def test_empty_dictionary_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "empty.txt"
    p.write_text("")
    code, out = run_cli([str(p)], "")
    assert code == 1
    assert "empty" in out


def test_dictionary_path_required(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        run_cli([], "")
    assert exc.value.code == 2
