# tests/test_profile_queries.py
# profiling harness: argument checks, summaries and a tiny end-to-end run

import importlib.util
import os

import pytest

TOOL = os.path.join(os.path.dirname(os.path.dirname(__file__)), "tools", "profile_queries.py")


@pytest.fixture(scope="module")
def profile_queries():
    spec = importlib.util.spec_from_file_location("profile_queries", TOOL)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_summarize_empty_list(profile_queries):
    s = profile_queries.summarize([])
    assert s["count"] == 0
    assert s["max_ms"] == 0.0


def test_summarize_values(profile_queries):
    s = profile_queries.summarize([3.0, 1.0, 2.0])
    assert s["count"] == 3
    assert s["median_ms"] == 2.0
    assert s["max_ms"] == 3.0


@pytest.mark.parametrize("flag", ["--iters", "--warm", "--count"])
def test_non_positive_counts_rejected(profile_queries, flag):
    with pytest.raises(SystemExit) as exc:
        profile_queries.main([flag, "0"])
    assert exc.value.code == 2


def test_small_run_prints_both_query_kinds(profile_queries, tmp_path, capsys):
    p = tmp_path / "freq_dict.txt"
    p.write_text("5 cat\n3 car\n2 the\n1 then\n", encoding="utf-8")
    profile_queries.main(["--dict", str(p), "--warm", "1", "--iters", "3", "--count", "2"])
    out = capsys.readouterr().out
    assert "Built trie with 4 words" in out
    assert "prefix" in out
    assert "pattern" in out
