"""
Histogram Service Package -- fixed-bucket cumulative histograms.
"""

from configs.settings import get_settings
from services.histogram_service.bucket_histogram import (
    BucketHistogram,
    EmptyBoundsError,
    InvalidBoundsError,
)


def new_default_histogram() -> BucketHistogram:
    """Fresh histogram over the configured default bounds."""
    return BucketHistogram(get_settings().histogram_default_bounds)


__all__ = [
    "BucketHistogram",
    "EmptyBoundsError",
    "InvalidBoundsError",
    "new_default_histogram",
]
