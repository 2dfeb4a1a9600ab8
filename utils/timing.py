"""
Timing helper that feeds elapsed time into a BucketHistogram.

time.perf_counter_ns() is monotonic with nanosecond resolution; wall-clock
time can jump on NTP sync. Histograms take integers, so elapsed time is
truncated to whole units before recording.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generator, Optional

from utils.logger import get_logger

if TYPE_CHECKING:
    from services.histogram_service.bucket_histogram import BucketHistogram

_log = get_logger(__name__)

_NS_PER_UNIT = {"ns": 1, "us": 1_000, "ms": 1_000_000}


@contextmanager
def timed(
    label: str,
    histogram: Optional["BucketHistogram"] = None,
    unit: str = "us",
) -> Generator[dict, None, None]:
    """
    Measure the enclosed block and optionally record it.

    Usage:
        latency = BucketHistogram([100, 500, 1000, 5000])
        with timed("db_query", histogram=latency) as t:
            rows = cursor.fetchall()
        print(t["us"])

    The dict is filled in after the block exits, with "ns", "us" and "ms".
    The sample is recorded even if the block raises.
    """
    try:
        divisor = _NS_PER_UNIT[unit]
    except KeyError:
        raise ValueError(f"unknown unit {unit!r}, expected one of {sorted(_NS_PER_UNIT)}") from None

    result: dict = {}
    start = time.perf_counter_ns()
    try:
        yield result
    finally:
        elapsed_ns = time.perf_counter_ns() - start
        result["ns"] = elapsed_ns
        result["us"] = elapsed_ns / 1_000
        result["ms"] = elapsed_ns / 1_000_000
        if histogram is not None:
            histogram.record(elapsed_ns // divisor)
        _log.debug(label, latency_ms=round(result["ms"], 3))
