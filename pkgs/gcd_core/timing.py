"""Timed variants of the GCD entry points."""
import time
from functools import wraps
from typing import Callable

from .common import TimedGcd
from .euclidean import gcd_euclidean, gcd_euclidean_of
from .stein import gcd_stein, gcd_stein_of


def timed(func: Callable[..., int]) -> Callable[..., TimedGcd]:
    """Wrap a GCD entry point so it also reports elapsed monotonic ticks (ns)."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> TimedGcd:
        start = time.perf_counter_ns()
        value = func(*args, **kwargs)
        elapsed = time.perf_counter_ns() - start
        return TimedGcd(value=value, elapsed_ticks=elapsed)
    return wrapper


gcd_euclidean_timed = timed(gcd_euclidean)
gcd_euclidean_of_timed = timed(gcd_euclidean_of)
gcd_stein_timed = timed(gcd_stein)
gcd_stein_of_timed = timed(gcd_stein_of)
