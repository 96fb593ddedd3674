"""
Sources of randomness and time for vector generation.

Both are injected into the engine so tests can supply deterministic
sequences. The defaults are safe to share between threads.
"""

import secrets
import time
from collections.abc import Callable
from typing import Protocol

Clock = Callable[[], int]


class RandomSource(Protocol):
    """Provides uniformly distributed random bytes."""

    def token_bytes(self, count: int) -> bytes: ...


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG."""

    def token_bytes(self, count: int) -> bytes:
        return secrets.token_bytes(count)


def system_clock() -> int:
    """Current wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()
