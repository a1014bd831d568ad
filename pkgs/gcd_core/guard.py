"""
Operand validation shared by every GCD entry point.

The guard looks at the combined operand set: the fixed operands and any
variadic tail are checked together, never pair by pair.
"""
import logging
import operator
from typing import Iterable, List

import numpy as np

from .common import INT32_MIN, INT32_MAX, InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


def _as_int(value) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"GCD operands must be integers, got {type(value).__name__}"
        ) from None


def validate_operands(operands: Iterable) -> List[int]:
    """
    Check an operand set and return the magnitudes of its members.

    The range check runs before the zero check so that INT32_MIN is
    rejected before anything tries to negate it.

    Raises:
        TypeError: an operand is not integral.
        OutOfRangeError: an operand is INT32_MIN or does not fit in int32.
        InvalidArgumentError: fewer than two operands, or every operand is 0.
    """
    values = [_as_int(v) for v in operands]
    if len(values) < 2:
        raise InvalidArgumentError(
            f"At least two numbers are required, got {len(values)}."
        )

    for v in values:
        if v == INT32_MIN:
            raise OutOfRangeError(f"Number cannot be {INT32_MIN}.")
        if v < -INT32_MAX or v > INT32_MAX:
            raise OutOfRangeError(
                f"Number {v} is outside [{-INT32_MAX}, {INT32_MAX}]."
            )

    if not any(values):
        raise InvalidArgumentError("All numbers cannot be 0 at the same time.")

    magnitudes = np.abs(np.asarray(values, dtype=np.int32)).tolist()
    logger.debug(f"Validated {len(magnitudes)} operands")
    return magnitudes
