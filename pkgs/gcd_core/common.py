"""
Common constants, error types and result containers shared by the GCD engine.

Operands live in the signed 32-bit domain. The most negative value has no
representable absolute value in that width, so it is excluded from the
accepted range.
"""
from dataclasses import dataclass

import numpy as np

_INT32 = np.iinfo(np.int32)

INT32_MIN = int(_INT32.min)
INT32_MAX = int(_INT32.max)


class GcdError(ValueError):
    """Base class for operand sets the engine refuses to reduce."""


class InvalidArgumentError(GcdError):
    """Raised when the GCD is undefined for the operand set (e.g. all zeros)."""


class OutOfRangeError(GcdError):
    """Raised when an operand falls outside [-INT32_MAX, INT32_MAX]."""


@dataclass(frozen=True)
class TimedGcd:
    """GCD value together with the monotonic time spent computing it."""
    value: int
    elapsed_ticks: int

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ticks / 1e9
