"""
Diagnostics for the GCD engine.

Agreement checks between the two reductions and a numpy reference, and a
timing benchmark comparing the reductions on identical operand sets.
"""

from .agreement import AgreementReport, random_operand_sets, reference_gcd, check_agreement
from .benchmark import TIMED_ALGORITHMS, benchmark_algorithms, run_benchmark

__all__ = [
    'AgreementReport',
    'random_operand_sets',
    'reference_gcd',
    'check_agreement',
    'TIMED_ALGORITHMS',
    'benchmark_algorithms',
    'run_benchmark'
]
