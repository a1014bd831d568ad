"""
Binary (Stein) reduction.

Uses halving and subtraction only. The multi-operand form folds the pairwise
step against the running intermediate result.
"""
import logging
from functools import reduce
from typing import Iterable

from .guard import validate_operands

logger = logging.getLogger(__name__)


def stein_pair(a: int, b: int) -> int:
    """GCD of two non-negative integers by recursive binary reduction."""
    if a == b or a == 0:
        return b
    if b == 0:
        return a

    a_even = (a & 1) == 0
    b_even = (b & 1) == 0

    if a_even and b_even:
        return stein_pair(a >> 1, b >> 1) << 1
    if a_even:
        return stein_pair(a >> 1, b)
    if b_even:
        return stein_pair(a, b >> 1)
    # both odd, so the difference is even
    if a > b:
        return stein_pair((a - b) >> 1, b)
    return stein_pair((b - a) >> 1, a)


def gcd_stein_of(operands: Iterable) -> int:
    """GCD of an operand sequence by the Stein algorithm."""
    magnitudes = validate_operands(operands)
    result = reduce(stein_pair, magnitudes)
    logger.debug(f"Stein GCD of {len(magnitudes)} operands = {result}")
    return result


def gcd_stein(a, b, *others) -> int:
    """
    GCD of two, three or more integers by the Stein algorithm.

    Raises:
        InvalidArgumentError: all numbers are 0 at the same time.
        OutOfRangeError: a number is INT32_MIN or outside the int32 range.
    """
    return gcd_stein_of((a, b) + others)
