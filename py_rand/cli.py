"""
Dump reproducible sequences for a seed.

Useful for comparing output across machines and interpreter versions:

    py-rand --seed 42 --count 5 --kind int --max 10
"""

import argparse
from typing import Callable, Dict, List, Optional

import structlog

from .core.lcg_random import LCGRandom
from .utils.log import configure_logging

logger = structlog.get_logger(__name__)

KINDS = ("int", "int64", "float", "double", "bool", "bytes")


def _drawer(prng: LCGRandom, kind: str, max_value: Optional[int], width: int) -> Callable[[], str]:
    draws: Dict[str, Callable[[], str]] = {
        "int": lambda: str(prng.next_int(max_value)),
        "int64": lambda: str(prng.next_int64()),
        "float": lambda: repr(prng.next_float()),
        "double": lambda: repr(prng.next_double()),
        "bool": lambda: str(prng.next_bool()).lower(),
        "bytes": lambda: prng.next_bytes(width).hex(),
    }
    return draws[kind]


def generate(seed: int, count: int, kind: str = "int",
             max_value: Optional[int] = None, width: int = 16) -> List[str]:
    """Return `count` formatted values drawn from a generator seeded with `seed`."""
    prng = LCGRandom(seed)
    draw = _drawer(prng, kind, max_value, width)
    return [draw() for _ in range(count)]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print values from a seeded generator")
    parser.add_argument("--seed", type=lambda s: int(s, 0), required=True,
                        help="64-bit seed (decimal or 0x-prefixed hex)")
    parser.add_argument("--count", type=int, default=10, help="Number of values to print")
    parser.add_argument("--kind", choices=KINDS, default="int", help="Kind of value to draw")
    parser.add_argument("--max", dest="max_value", type=int,
                        help="Exclusive upper bound for --kind int")
    parser.add_argument("--width", type=int, default=16,
                        help="Bytes per line for --kind bytes")

    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must not be negative")
    if args.max_value is not None:
        if args.kind != "int":
            parser.error(f"--max only applies to --kind int, not --kind {args.kind}")
        if not 0 < args.max_value < 2**31:
            parser.error("--max must be in (0, 2**31)")
    if args.width < 0:
        parser.error("--width must not be negative")

    configure_logging()
    logger.debug("dumping_sequence", seed=args.seed, kind=args.kind, count=args.count)

    for line in generate(args.seed, args.count, args.kind, args.max_value, args.width):
        print(line)


if __name__ == "__main__":
    main()
