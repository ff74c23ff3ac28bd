# tools/profile_queries.py
"""
Small profiling harness for DictionaryTrie queries.
Usage:
  python tools/profile_queries.py --dict freq_dict.txt --warm 100 --iters 1000 --count 10

Without --dict a synthetic dictionary is generated. Prints mean/median/p90/max
latency for prefix and wildcard queries.
"""
import argparse
import random
import statistics
import string
import time

from dictionary_trie.core.trie import DictionaryTrie
from dictionary_trie.utils.dict_loader import load_dict

PREFIXES = ["a", "th", "pro", "re", "con", "s", "in"]
PATTERNS = ["c_t", "_a_", "th_", "s__d", "___"]


def synthetic(trie: DictionaryTrie, n: int = 50_000, seed: int = 7):
    rng = random.Random(seed)
    letters = string.ascii_lowercase
    while len(trie) < n:
        w = "".join(rng.choice(letters) for _ in range(rng.randint(2, 9)))
        trie.insert(w, rng.randint(1, 10_000))


def benchmark(trie: DictionaryTrie, queries, count: int, iterations: int = 200):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        _ = trie.complete(q, count)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def positive_int(text):
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return n


def summarize(times):
    times_sorted = sorted(times)
    if not times_sorted:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p90_ms": 0.0, "max_ms": 0.0}
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": times_sorted[-1],
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--dict", type=str, default=None, help="dictionary file to load")
    parser.add_argument("--warm", type=positive_int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=positive_int, default=500, help="measured iterations")
    parser.add_argument("--count", type=positive_int, default=10, help="completions per query")
    args = parser.parse_args(argv)

    trie = DictionaryTrie()
    t0 = time.perf_counter()
    if args.dict:
        load_dict(trie, args.dict)
    else:
        synthetic(trie)
    print(f"Built trie with {len(trie):,} words in {time.perf_counter() - t0:.2f}s")

    print("Warming up...")
    benchmark(trie, PREFIXES + PATTERNS, args.count, iterations=args.warm)

    print("Measuring...")
    for name, queries in (("prefix", PREFIXES), ("pattern", PATTERNS)):
        s = summarize(benchmark(trie, queries, args.count, iterations=args.iters))
        print("%-8s mean=%.3f median=%.3f p90=%.3f max=%.3f (ms, n=%d)" % (
            name, s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"], s["count"],
        ))

    print("Sample:", trie.complete(PREFIXES[0], args.count))


if __name__ == "__main__":
    main()
