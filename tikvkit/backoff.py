"""Retry delay policies with optional jitter."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


class BackoffKind(enum.Enum):
    """The pattern used to compute backoff times."""

    NONE = "none"
    NO_JITTER = "no_jitter"
    FULL_JITTER = "full_jitter"
    EQUAL_JITTER = "equal_jitter"
    DECORRELATED_JITTER = "decorrelated_jitter"


@dataclass
class Backoff:
    """Decides how long to wait before retrying a request."""

    kind: BackoffKind
    current_attempts: int
    max_attempts: int
    base_delay_ms: int
    current_delay_ms: int
    max_delay_ms: int

    @classmethod
    def no_backoff(cls) -> "Backoff":
        """Don't wait; usually means the request should not be retried."""
        return cls(BackoffKind.NONE, 0, 0, 0, 0, 0)

    @classmethod
    def no_jitter_backoff(
        cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int
    ) -> "Backoff":
        """Exponential backoff: min(max_delay, base_delay * 2 ** attempts)."""
        return cls(
            BackoffKind.NO_JITTER, 0, max_attempts, base_delay_ms, base_delay_ms, max_delay_ms
        )

    @classmethod
    def full_jitter_backoff(
        cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int
    ) -> "Backoff":
        """Exponential backoff with a random delay between zero and the cap."""
        if not (base_delay_ms > 0 and max_delay_ms > 0):
            raise ValueError("Both base_delay_ms and max_delay_ms must be positive")
        return cls(
            BackoffKind.FULL_JITTER, 0, max_attempts, base_delay_ms, base_delay_ms, max_delay_ms
        )

    @classmethod
    def equal_jitter_backoff(
        cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int
    ) -> "Backoff":
        """Exponential backoff with a random delay of at least half the cap."""
        if not (base_delay_ms > 1 and max_delay_ms > 1):
            raise ValueError("Both base_delay_ms and max_delay_ms must be greater than 1")
        return cls(
            BackoffKind.EQUAL_JITTER, 0, max_attempts, base_delay_ms, base_delay_ms, max_delay_ms
        )

    @classmethod
    def decorrelated_jitter_backoff(
        cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int
    ) -> "Backoff":
        """Random delay between base_delay and three times the previous delay."""
        if not base_delay_ms > 0:
            raise ValueError("base_delay_ms must be positive")
        return cls(
            BackoffKind.DECORRELATED_JITTER,
            0,
            max_attempts,
            base_delay_ms,
            base_delay_ms,
            max_delay_ms,
        )

    def next_delay_duration(self) -> Optional[timedelta]:
        """Return the delay before the next retry, or None when no retry is left."""
        if self.current_attempts >= self.max_attempts:
            return None
        self.current_attempts += 1

        if self.kind is BackoffKind.NONE:
            return None
        if self.kind is BackoffKind.NO_JITTER:
            delay_ms = min(self.max_delay_ms, self.current_delay_ms)
            self.current_delay_ms <<= 1
            return timedelta(milliseconds=delay_ms)
        if self.kind is BackoffKind.FULL_JITTER:
            cap = min(self.max_delay_ms, self.current_delay_ms)
            delay_ms = random.randrange(0, cap)
            self.current_delay_ms <<= 1
            return timedelta(milliseconds=delay_ms)
        if self.kind is BackoffKind.EQUAL_JITTER:
            cap = min(self.max_delay_ms, self.current_delay_ms)
            half = cap >> 1
            delay_ms = random.randrange(0, half) + half
            self.current_delay_ms <<= 1
            return timedelta(milliseconds=delay_ms)
        # Decorrelated jitter.
        delay_ms = (
            random.randrange(0, self.current_delay_ms * 3 - self.base_delay_ms)
            + self.base_delay_ms
        )
        delay_ms = min(delay_ms, self.max_delay_ms)
        self.current_delay_ms = delay_ms
        return timedelta(milliseconds=delay_ms)

    def is_none(self) -> bool:
        """True if no backoff should happen at all."""
        return self.kind is BackoffKind.NONE


DEFAULT_REGION_BACKOFF = Backoff.no_jitter_backoff(2, 500, 10)
OPTIMISTIC_BACKOFF = Backoff.no_jitter_backoff(2, 500, 10)
PESSIMISTIC_BACKOFF = Backoff.no_backoff()