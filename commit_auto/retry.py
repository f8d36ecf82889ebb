"""Retry Policy - Bounded attempts with exponential backoff."""

import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

T = TypeVar("T")


class AttemptFailed(Exception):
    """Raised by an operation to mark a single attempt as retryable."""
    pass


class RetriesExhausted(Exception):
    """Raised when every attempt allowed by the policy has failed."""

    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(f"Failed after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to try and how long to wait in between."""
    max_attempts: int = 3
    initial_delay: float = 1.0
    multiplier: float = 2.0
    sleep: Callable[[float], None] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.initial_delay < 0:
            raise ValueError(f"initial_delay cannot be negative, got {self.initial_delay}")

    def delay_for(self, attempt: int) -> float:
        """Backoff after the given (1-based) failed attempt: 1, 2, 4, ..."""
        return self.initial_delay * self.multiplier ** (attempt - 1)


RetryCallback = Callable[[int, float, Exception], None]


def call_with_retry(operation: Callable[[], T], policy: RetryPolicy,
                    on_retry: RetryCallback | None = None) -> T:
    """Run operation until it succeeds or the policy runs out of attempts.

    Only AttemptFailed is retried; anything else propagates immediately.
    on_retry(attempt, delay, error) is called before each wait.
    """
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return operation()
        except AttemptFailed as e:
            if attempt == policy.max_attempts:
                raise RetriesExhausted(attempt, e) from e
            delay = policy.delay_for(attempt)
            if on_retry:
                on_retry(attempt, delay, e)
            (policy.sleep or time.sleep)(delay)

    # max_attempts >= 1 is enforced, so the loop always returns or raises
    raise AssertionError("unreachable")
