"""
Shared per-thread generator.

Creating an LCGRandom is cheap, but callers that just want "some" randomness
can use get_system_random() instead. Each thread gets its own instance, so no
locking is needed. Do not hand the returned generator to another thread.
"""

import threading

import structlog

from ..core.lcg_random import LCGRandom

logger = structlog.get_logger(__name__)

_local = threading.local()


def get_system_random() -> LCGRandom:
    """
    Get the calling thread's shared generator.

    The instance is created and randomly seeded on first access from each
    thread, then kept for the lifetime of that thread.

    Returns:
        LCGRandom owned by the current thread
    """
    prng = getattr(_local, "prng", None)
    if prng is None:
        prng = LCGRandom()
        prng.is_system_random = True
        _local.prng = prng
        logger.debug("system_random_created", thread=threading.current_thread().name)
    return prng


def reset_system_random() -> None:
    """Drop the calling thread's shared generator; the next access creates a new one."""
    if hasattr(_local, "prng"):
        del _local.prng
