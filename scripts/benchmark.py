"""
Batch recording benchmark -- record() loop vs record_many().

Generates seeded samples spread across (and past) the default bounds,
records them both ways into fresh histograms, and reports timings.
Exits non-zero if the two histograms disagree.

Usage:
    python -m scripts.benchmark --num-samples 100000 --seed 1234
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from configs.settings import get_settings
from services.histogram_service import new_default_histogram
from utils.logger import get_logger, setup_logging
from utils.timing import timed

_log = get_logger(__name__)


def generate_samples(bounds: List[int], num_samples: int, seed: int) -> List[int]:
    """Uniform samples in [0, 1.25 * largest bound], so some overflow every bucket."""
    rng = random.Random(seed)
    ceiling = max(bounds) * 5 // 4 + 1
    return [rng.randint(0, ceiling) for _ in range(num_samples)]


def run_benchmark(num_samples: int, seed: int) -> bool:
    """Record the same samples both ways. Returns True if the results match."""
    single = new_default_histogram()
    batch = new_default_histogram()
    samples = generate_samples(list(single.bounds), num_samples, seed)

    with timed("record_loop") as t_single:
        for sample in samples:
            single.record(sample)

    with timed("record_many") as t_batch:
        batch.record_many(samples)

    matches = single == batch
    speedup = t_single["ms"] / t_batch["ms"] if t_batch["ms"] else float("inf")

    print(f"\n{'='*50}")
    print(f" Histogram Benchmark ({num_samples} samples, {len(single.bounds)} buckets)")
    print(f"{'='*50}")
    print(f"  record() loop:  {t_single['ms']:.2f} ms")
    print(f"  record_many():  {t_batch['ms']:.2f} ms")
    print(f"  Speedup:        {speedup:.2f}x")
    print(f"")
    print(f"  Count:          {batch.count()}")
    print(f"  Sum:            {batch.sum()}")
    for bound, count in batch.buckets():
        print(f"  le={bound:<8}    {count}")
    print(f"{'='*50}")

    if matches:
        print("  PASS record() and record_many() agree")
    else:
        print("  FAIL record() and record_many() disagree")
        _log.error("histogram_mismatch", single=repr(single), batch=repr(batch))
    return matches


def main() -> None:
    cfg = get_settings()
    parser = argparse.ArgumentParser(description="Benchmark batch histogram recording")
    parser.add_argument("--num-samples", "-n", type=int, default=cfg.benchmark_num_samples)
    parser.add_argument("--seed", type=int, default=cfg.benchmark_seed)
    args = parser.parse_args()

    setup_logging()
    ok = run_benchmark(num_samples=args.num_samples, seed=args.seed)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
