"""
Cross-algorithm agreement checks for the GCD engine.

Both reductions are compared with each other and with numpy's ``gcd`` ufunc
over randomly generated operand sets.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from pkgs.gcd_core import INT32_MAX, gcd_euclidean_of, gcd_stein_of

logger = logging.getLogger(__name__)


@dataclass
class AgreementReport:
    """Outcome of comparing both algorithms against the reference."""
    checked: int
    mismatches: List[Tuple[Tuple[int, ...], int, int, int]] = field(default_factory=list)

    @property
    def all_agree(self) -> bool:
        return not self.mismatches


def random_operand_sets(samples: int, operands_per_set: int = 3,
                        max_magnitude: int = INT32_MAX,
                        seed: Optional[int] = 0) -> List[Tuple[int, ...]]:
    """Generate valid operand sets (never all zero, never INT32_MIN)."""
    if operands_per_set < 2:
        raise ValueError("operands_per_set must be at least 2")
    bound = min(int(max_magnitude), INT32_MAX)
    if bound < 1:
        raise ValueError("max_magnitude must be positive")

    rng = np.random.default_rng(seed)
    table = rng.integers(-bound, bound, size=(samples, operands_per_set),
                         dtype=np.int64, endpoint=True)
    # an all-zero row has no GCD
    zero_rows = ~table.any(axis=1)
    table[zero_rows, 0] = 1
    return [tuple(int(v) for v in row) for row in table]


def reference_gcd(operands: Sequence[int]) -> int:
    """GCD computed by numpy, used as the independent reference."""
    return int(np.gcd.reduce(np.asarray(operands, dtype=np.int64)))


def check_agreement(operand_sets: Sequence[Sequence[int]]) -> AgreementReport:
    """Compare Euclidean, Stein and reference GCDs over every operand set."""
    report = AgreementReport(checked=0)
    for operands in operand_sets:
        euclid = gcd_euclidean_of(operands)
        stein = gcd_stein_of(operands)
        ref = reference_gcd(operands)
        report.checked += 1
        if not (euclid == stein == ref):
            report.mismatches.append((tuple(operands), euclid, stein, ref))
            logger.error(f"GCD mismatch for {tuple(operands)}: "
                         f"euclidean={euclid}, stein={stein}, reference={ref}")

    logger.info(f"Checked {report.checked} operand sets, "
                f"{len(report.mismatches)} mismatches")
    return report
