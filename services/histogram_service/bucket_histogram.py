"""
Bucketed histogram -- fixed upper bounds, cumulative counts.

Architecture decisions:
  1. Buckets are "less than or equal to" inclusion sets, not disjoint bins.
     A sample of 3 with bounds [10, 25, 100] lands in all three buckets.
     This is the shape Prometheus histograms expect on export.
  2. Bounds are fixed at construction and never re-sorted. Whatever order
     the caller gives is the order buckets() reports, so each count stays
     attached to the bound it was configured with.
  3. Construction rejects empty or negative bounds and bounds that descend.
     record() and record_many() only agree when bounds ascend.
  4. record_many() classifies each sample into its first matching bucket,
     then runs a prefix sum over the batch before merging. The scan stops at
     the first match; the end state equals calling record() per sample.
  5. Sum and count are plain Python ints (arbitrary precision), so they
     never wrap or saturate.

Not thread-safe. Owners that share a histogram across threads wrap it in
their own lock.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from utils.logger import get_logger

_log = get_logger(__name__)


class InvalidBoundsError(ValueError):
    """Bucket bounds cannot form a cumulative histogram."""


class EmptyBoundsError(InvalidBoundsError):
    """No bucket bounds were given."""


def _validate_bounds(bounds: Tuple[int, ...]) -> None:
    if not bounds:
        raise EmptyBoundsError("histogram needs at least one bucket bound")

    for idx, bound in enumerate(bounds):
        if bound < 0:
            raise InvalidBoundsError(
                f"bucket bound at index {idx} is negative: {bound}"
            )
        if idx > 0 and bound < bounds[idx - 1]:
            raise InvalidBoundsError(
                f"bucket bounds must be ascending: {bounds[idx - 1]} "
                f"is followed by {bound} at index {idx}"
            )


class BucketHistogram:
    """Tracks how many samples fall at or below each configured bound."""

    __slots__ = ("_bounds", "_buckets", "_count", "_sum")

    def __init__(self, bounds: Iterable[int]) -> None:
        bounds = tuple(bounds)
        try:
            _validate_bounds(bounds)
        except InvalidBoundsError as e:
            _log.warning("histogram_rejected", bounds=list(bounds), reason=str(e))
            raise

        self._bounds: Tuple[int, ...] = bounds
        self._buckets: List[int] = [0] * len(bounds)
        self._count = 0
        self._sum = 0

        _log.debug("histogram_created", buckets=len(bounds))

    # ── Reads ───────────────────────────────────────────────

    @property
    def bounds(self) -> Tuple[int, ...]:
        return self._bounds

    def sum(self) -> int:
        """Sum of every sample recorded so far."""
        return self._sum

    def count(self) -> int:
        """Number of samples recorded so far, including ones above every bound."""
        return self._count

    def buckets(self) -> List[Tuple[int, int]]:
        """
        Snapshot of (bound, count) pairs in construction order.

        Each call builds a new list, so callers may mutate it freely.
        """
        return list(zip(self._bounds, self._buckets))

    # ── Writes ──────────────────────────────────────────────

    def record(self, sample: int) -> None:
        """Record a single sample into every bucket whose bound covers it."""
        self._sum += sample
        self._count += 1

        for idx, bound in enumerate(self._bounds):
            if sample <= bound:
                self._buckets[idx] += 1

    def record_many(self, samples: Iterable[int]) -> None:
        """
        Record a batch of samples.

        Ends in exactly the state that calling record() on each sample would
        produce, in any order. Each sample is placed in the first bucket that
        covers it, then the per-batch counts are accumulated forward so every
        larger bucket also includes it. Samples above every bound only touch
        sum and count.
        """
        bounds = self._bounds
        bucketed = [0] * len(bounds)
        total = 0
        count = 0

        for sample in samples:
            total += sample
            count += 1

            for idx, bound in enumerate(bounds):
                if sample <= bound:
                    bucketed[idx] += 1
                    break

        if count == 0:
            return

        # Running sum turns "first match" counts into "<= bound" counts.
        for idx in range(len(bucketed) - 1):
            bucketed[idx + 1] += bucketed[idx]

        for idx, local in enumerate(bucketed):
            self._buckets[idx] += local
        self._sum += total
        self._count += count

    # ── Value semantics ─────────────────────────────────────

    def copy(self) -> "BucketHistogram":
        """Independent clone with the same bounds and counts."""
        clone = BucketHistogram.__new__(BucketHistogram)
        clone._bounds = self._bounds
        clone._buckets = list(self._buckets)
        clone._count = self._count
        clone._sum = self._sum
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BucketHistogram):
            return NotImplemented
        return (
            self._bounds == other._bounds
            and self._buckets == other._buckets
            and self._count == other._count
            and self._sum == other._sum
        )

    def __repr__(self) -> str:
        return (
            f"BucketHistogram(buckets={self.buckets()!r}, "
            f"count={self._count}, sum={self._sum})"
        )
