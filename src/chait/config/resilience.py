"""Retry configuration for store operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Bounded retry with linear backoff.

    The pause after the n-th failed attempt is ``n * backoff_seconds``, so the
    default policy waits 1s and then 2s before giving up on the third attempt.
    """

    max_attempts: int = 3
    backoff_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must be non-negative")
