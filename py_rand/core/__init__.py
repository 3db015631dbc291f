"""
Core generator functionality.
"""

from .big_integer import BigInteger, BigIntegerLike, SupportsBitRange
from .entropy import EntropySource, FixedEntropy, SystemEntropy
from .lcg_random import LCGRandom

__all__ = ['BigInteger', 'BigIntegerLike', 'EntropySource', 'FixedEntropy',
           'SupportsBitRange', 'SystemEntropy', 'LCGRandom']
