"""
Entropy providers for reseeding generators.

LCGRandom.set_seed_randomly() pulls a handful of 64-bit values from an
EntropySource and folds them into the seed. The default SystemEntropy reads
clocks and a process-wide counter; FixedEntropy replays a scripted sequence
so reseeding can be tested without real clocks.
"""

import itertools
import threading
import time
from typing import Callable, Iterable, List, Protocol

import structlog

logger = structlog.get_logger(__name__)


class EntropySource(Protocol):
    """Provides the values mixed into a generator seed on reseed."""

    def gather(self, identity: int) -> List[int]:
        """Return the values to fold in, in order, for an instance with this identity."""
        ...

    def absorb(self, seed: int) -> None:
        """Feed a freshly derived seed back so later gathers diverge."""
        ...


def _read_clock(name: str, clock: Callable[[], int]) -> int:
    try:
        return clock()
    except OSError as exc:
        logger.debug("entropy_source_unavailable", source=name, error=str(exc))
        return 0


class SystemEntropy:
    """
    Time, identity and counter based entropy.

    Each gather() increments a counter shared by the whole process, so two
    generators created within the same clock tick still diverge. The
    accumulator absorbs every seed it helped produce.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._accumulator = 0

    def gather(self, identity: int) -> List[int]:
        with self._lock:
            ticket = next(self._counter)
            accumulated = self._accumulator

        return [
            accumulated ^ identity ^ (ticket << 32),
            _read_clock("monotonic_ns", time.monotonic_ns),
            _read_clock("perf_counter_ns", time.perf_counter_ns),
            _read_clock("time_ns", time.time_ns),
        ]

    def absorb(self, seed: int) -> None:
        with self._lock:
            self._accumulator ^= seed


class FixedEntropy:
    """Deterministic entropy for tests: replays `values` on every gather."""

    def __init__(self, values: Iterable[int] = (0,)):
        self.values = list(values)
        self.absorbed: List[int] = []

    def gather(self, identity: int) -> List[int]:
        return list(self.values)

    def absorb(self, seed: int) -> None:
        self.absorbed.append(seed)


# Shared by every generator that is not given its own source
system_entropy = SystemEntropy()
