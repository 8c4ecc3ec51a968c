"""
Benchmark: structedit sequence alignment and structural diff.

The O(NP) aligner runs in time proportional to (n - m) * p, where p is the
number of deletions.  This script shows the effect: near-identical inputs
diff in roughly linear time, unrelated inputs approach quadratic time.
"""

import copy
import random
import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from structedit import diff, patch, vec_edits


CONFIG_A = {
    "server": {"host": "0.0.0.0", "port": 443, "tls": True, "workers": 4},
    "database": {"host": "db.internal", "port": 5432, "name": "production",
                 "pool_size": 10, "ssl": True},
    "logging": {"level": "WARN", "format": "json", "outputs": ["stdout", "file"]},
    "cache": {"backend": "redis", "ttl": 300, "max_size": 10000},
}

CONFIG_B = {
    "server": {"host": "0.0.0.0", "port": 8080, "tls": False, "workers": 8},
    "database": {"host": "db.staging", "port": 5432, "name": "staging",
                 "pool_size": 5, "ssl": False},
    "logging": {"level": "DEBUG", "format": "text", "outputs": ["stdout"]},
    "monitoring": {"enabled": True, "endpoint": "/health"},
}


def _time(fn, repeat=5):
    """Best wall-clock time of ``repeat`` runs, in milliseconds."""
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best * 1000


def benchmark_alignment():
    print("=" * 70)
    print("  SEQUENCE ALIGNMENT — similar vs. dissimilar input")
    print("=" * 70)
    rng = random.Random(1)
    for n in (500, 2_000, 8_000):
        a = list(range(n))
        similar = list(a)
        for _ in range(10):
            similar[rng.randrange(n)] = -1
        dissimilar = [rng.randrange(n) for _ in range(n // 10)]

        t_similar = _time(lambda: vec_edits(a, similar))
        t_dissimilar = _time(lambda: vec_edits(a, dissimilar), repeat=1)
        print(f"  n={n:>6}   10 edits: {t_similar:9.2f} ms"
              f"   unrelated (m={len(dissimilar)}): {t_dissimilar:9.2f} ms")


def benchmark_documents():
    print()
    print("=" * 70)
    print("  STRUCTURAL DIFF — configuration documents")
    print("=" * 70)
    script = diff(CONFIG_A, CONFIG_B)
    print(f"  edits: {script.edit_distance()}  (adds={script.get_adds_num()}, "
          f"deletes={script.get_dels_num()}, replaces={script.get_reps_num()})")
    for edit in script:
        print(f"    {edit!r}")
    assert patch(CONFIG_A, script) == CONFIG_B

    big_a = {"items": [copy.deepcopy(CONFIG_A) for _ in range(500)]}
    big_b = copy.deepcopy(big_a)
    big_b["items"][250]["server"]["port"] = 1
    del big_b["items"][100]
    t = _time(lambda: diff(big_a, big_b))
    print(f"  500-document list, one change + one delete: {t:.2f} ms "
          f"({diff(big_a, big_b).edit_distance()} edits)")


if __name__ == "__main__":
    benchmark_alignment()
    benchmark_documents()
