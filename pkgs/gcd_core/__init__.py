"""
Greatest common divisor engine for signed 32-bit integers.

Two reductions are provided, Euclidean (repeated modulo) and binary/Stein
(halving and subtraction), each with a timed variant.
"""

# Shared types
from .common import (
    INT32_MIN, INT32_MAX, GcdError, InvalidArgumentError, OutOfRangeError, TimedGcd
)

# Validation
from .guard import validate_operands

# Reductions
from .euclidean import euclidean_pair, gcd_euclidean, gcd_euclidean_of
from .stein import stein_pair, gcd_stein, gcd_stein_of

# Timing
from .timing import (
    timed, gcd_euclidean_timed, gcd_euclidean_of_timed, gcd_stein_timed, gcd_stein_of_timed
)

__all__ = [
    # Common
    'INT32_MIN', 'INT32_MAX', 'GcdError', 'InvalidArgumentError', 'OutOfRangeError', 'TimedGcd',
    # Guard
    'validate_operands',
    # Euclidean
    'euclidean_pair', 'gcd_euclidean', 'gcd_euclidean_of',
    # Stein
    'stein_pair', 'gcd_stein', 'gcd_stein_of',
    # Timing
    'timed', 'gcd_euclidean_timed', 'gcd_euclidean_of_timed', 'gcd_stein_timed', 'gcd_stein_of_timed',
]
