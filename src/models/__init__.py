"""
Data models for polytoken.

Core models:
- TokenType: Supported tokenizer families
- TokenCountResult: Uniform per-text counting outcome
- TimingStats: Benchmark statistics per family
- WarmUpStatus: Outcome of a cache warm-up
"""

from src.models.token_count import (
    BENCHMARK_ORDER,
    TimingStats,
    TokenCountResult,
    TokenType,
    WarmUpStatus,
)

__all__ = [
    "TokenType",
    "BENCHMARK_ORDER",
    "TokenCountResult",
    "TimingStats",
    "WarmUpStatus",
]
