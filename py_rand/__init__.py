"""
py_rand: deterministic linear-congruential random numbers.

Reproducible integers, floats, booleans, big integers and byte fills from a
64-bit seed, plus a per-thread shared generator. Not for cryptographic use.

Logging goes through structlog; call configure_logging() once at startup so
debug events are filtered by the configured level.
"""

from .config import Settings, get_settings
from .core import (
    BigInteger,
    BigIntegerLike,
    EntropySource,
    FixedEntropy,
    LCGRandom,
    SupportsBitRange,
    SystemEntropy,
)
from .utils.log import configure_logging
from .utils.random import get_system_random, reset_system_random

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "BigIntegerLike",
    "EntropySource",
    "FixedEntropy",
    "LCGRandom",
    "Settings",
    "SupportsBitRange",
    "SystemEntropy",
    "configure_logging",
    "get_settings",
    "get_system_random",
    "reset_system_random",
]
