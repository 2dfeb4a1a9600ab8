"""
Smoke test for the batch recording benchmark script.
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from configs.settings import get_settings
from scripts.benchmark import generate_samples, run_benchmark


class TestBenchmark:
    def test_samples_are_seeded(self):
        assert generate_samples([10, 100], 50, seed=3) == generate_samples([10, 100], 50, seed=3)

    def test_samples_overflow_largest_bound(self):
        samples = generate_samples([10, 100], 2000, seed=1)
        assert min(samples) >= 0
        assert max(samples) > 100

    def test_run_reports_pass(self, capsys):
        get_settings.cache_clear()
        assert run_benchmark(num_samples=500, seed=7) is True
        out = capsys.readouterr().out
        assert "PASS" in out
        assert "500 samples" in out
