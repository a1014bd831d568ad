"""Timing comparison of the Euclidean and Stein reductions."""
import logging
from typing import Any, Callable, Dict, Sequence

import numpy as np

from pkgs.gcd_core import INT32_MAX, TimedGcd, gcd_euclidean_of_timed, gcd_stein_of_timed

from .agreement import random_operand_sets, check_agreement

logger = logging.getLogger(__name__)

TIMED_ALGORITHMS: Dict[str, Callable[..., TimedGcd]] = {
    'euclidean': gcd_euclidean_of_timed,
    'stein': gcd_stein_of_timed,
}


def benchmark_algorithms(operand_sets: Sequence[Sequence[int]],
                         repeats: int = 5) -> Dict[str, Dict[str, float]]:
    """
    Time every algorithm over the same operand sets.

    Each set is run once as a warm-up and then ``repeats`` times. Returns
    per-algorithm statistics of elapsed ticks (nanoseconds) together with the
    number of timed calls.
    """
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    if not operand_sets:
        raise ValueError("operand_sets must not be empty")

    results = {}
    for name, fn in TIMED_ALGORITHMS.items():
        ticks = []
        for operands in operand_sets:
            # Warm-up run
            fn(operands)
            for _ in range(repeats):
                ticks.append(fn(operands).elapsed_ticks)

        samples = np.asarray(ticks, dtype=np.int64)
        results[name] = {
            'calls': int(samples.size),
            'mean_ticks': float(np.mean(samples)),
            'median_ticks': float(np.median(samples)),
            'min_ticks': float(np.min(samples)),
            'max_ticks': float(np.max(samples)),
        }
        logger.info(f"{name}: median {results[name]['median_ticks']:.0f} ticks "
                    f"over {results[name]['calls']} calls")

    return results


def run_benchmark(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Check agreement and time both algorithms using the ``benchmark`` config section."""
    bench_cfg = cfg.get('benchmark', {})
    operand_sets = random_operand_sets(
        samples=int(bench_cfg.get('samples', 200)),
        operands_per_set=int(bench_cfg.get('operands_per_set', 3)),
        max_magnitude=int(bench_cfg.get('max_magnitude', INT32_MAX)),
        seed=bench_cfg.get('seed', 0)
    )
    report = check_agreement(operand_sets)
    timings = benchmark_algorithms(operand_sets, repeats=int(bench_cfg.get('repeats', 5)))
    return {
        'checked': report.checked,
        'all_agree': report.all_agree,
        'timings': timings
    }
