"""Deterministic randomness and time for correlation vector tests.

These replace the system random source and clock so that generated bases
and spin segments are predictable.
"""

from itertools import cycle, islice

# 1000 coarse intervals (1000 << 24 ticks of 100ns) after the epoch
FIXED_NOW_NS = (1000 << 24) * 100


class SequenceRandomSource:
    """Random source that replays a fixed byte sequence, cycling forever.

    Usage:
        source = SequenceRandomSource(bytes(range(16)))
        source.token_bytes(4)  # b"\\x00\\x01\\x02\\x03"
    """

    def __init__(self, data: bytes):
        if not data:
            raise ValueError("data must not be empty")
        self._data = cycle(data)
        self.requests: list[int] = []

    def token_bytes(self, count: int) -> bytes:
        self.requests.append(count)
        return bytes(islice(self._data, count))


class FixedClock:
    """Clock returning a constant nanosecond timestamp."""

    def __init__(self, now_ns: int):
        self.now_ns = now_ns

    def __call__(self) -> int:
        return self.now_ns
