"""
Centralized configuration -- loaded once at process startup.

Every knob comes from the environment (or .env), validated by Pydantic
at first access so bad config fails immediately.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Immutable, validated settings from environment."""

    # ── Logging ─────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Render logs as JSON instead of console text")

    # ── Histogram ───────────────────────────────────────────
    # Prometheus-style latency ladder, in milliseconds.
    histogram_default_bounds: List[int] = Field(
        default=[5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000],
        description="Ascending bucket bounds for new_default_histogram()",
    )

    # ── Benchmark ───────────────────────────────────────────
    benchmark_num_samples: int = Field(default=100_000, description="Samples per benchmark run")
    benchmark_seed: int = Field(default=1234, description="Seed for benchmark sample generation")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Singleton accessor -- parsed once and cached for the process lifetime.
        from configs.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
