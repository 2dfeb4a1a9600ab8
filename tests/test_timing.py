"""
Unit tests for the timed() helper -- elapsed-time capture and
histogram recording in each unit.
"""
import os
import sys
from types import SimpleNamespace

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from services.histogram_service import BucketHistogram
from utils import timing
from utils.timing import timed


@pytest.fixture()
def fake_clock(monkeypatch):
    """perf_counter_ns() returns 1_000_000 then 3_500_000 (2.5 ms apart)."""
    ticks = iter([1_000_000, 3_500_000])
    monkeypatch.setattr(timing, "time", SimpleNamespace(perf_counter_ns=lambda: next(ticks)))


class TestTimed:
    def test_populates_result(self, fake_clock):
        with timed("block") as t:
            assert t == {}
        assert t["ns"] == 2_500_000
        assert t["us"] == 2_500
        assert t["ms"] == 2.5

    def test_records_microseconds_by_default(self, fake_clock):
        h = BucketHistogram([1_000, 5_000])
        with timed("block", histogram=h):
            pass
        assert h.count() == 1
        assert h.sum() == 2_500
        assert h.buckets() == [(1_000, 0), (5_000, 1)]

    def test_records_truncated_milliseconds(self, fake_clock):
        h = BucketHistogram([2, 3])
        with timed("block", histogram=h, unit="ms"):
            pass
        assert h.sum() == 2
        assert h.buckets() == [(2, 1), (3, 1)]

    def test_records_nanoseconds(self, fake_clock):
        h = BucketHistogram([10_000_000])
        with timed("block", histogram=h, unit="ns"):
            pass
        assert h.sum() == 2_500_000

    def test_records_even_when_block_raises(self, fake_clock):
        h = BucketHistogram([10_000])
        with pytest.raises(RuntimeError):
            with timed("block", histogram=h):
                raise RuntimeError("boom")
        assert h.count() == 1

    def test_unknown_unit(self):
        h = BucketHistogram([1])
        with pytest.raises(ValueError, match="unknown unit"):
            with timed("block", histogram=h, unit="fortnight"):
                pass
        assert h.count() == 0

    def test_real_clock_is_non_negative(self):
        h = BucketHistogram([0, 10 ** 12])
        with timed("block", histogram=h) as t:
            sum(range(100))
        assert t["ns"] >= 0
        assert h.count() == 1
