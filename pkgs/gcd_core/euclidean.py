"""
Modulo-based Euclidean reduction.

The pairwise step works on magnitudes; the public entry points validate the
whole operand set first and then fold the pairwise step left to right.
"""
import logging
from functools import reduce
from typing import Iterable

from .guard import validate_operands

logger = logging.getLogger(__name__)


def euclidean_pair(a: int, b: int) -> int:
    """GCD of two non-negative integers, at least one of them non-zero."""
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    # one of them is zero here
    return a + b


def gcd_euclidean_of(operands: Iterable) -> int:
    """GCD of an operand sequence by the Euclidean algorithm."""
    magnitudes = validate_operands(operands)
    result = reduce(euclidean_pair, magnitudes)
    logger.debug(f"Euclidean GCD of {len(magnitudes)} operands = {result}")
    return result


def gcd_euclidean(a, b, *others) -> int:
    """
    GCD of two, three or more integers by the Euclidean algorithm.

    Raises:
        InvalidArgumentError: all numbers are 0 at the same time.
        OutOfRangeError: a number is INT32_MIN or outside the int32 range.
    """
    return gcd_euclidean_of((a, b) + others)
