"""
Engine service wrapper providing a request/result API over the GCD core.

The core raises on invalid operand sets; the service turns those errors into
failed results, records per-algorithm metrics and picks defaults from config.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Any, Optional, Sequence, Tuple

from pkgs.gcd_core import (
    GcdError, TimedGcd,
    gcd_euclidean_of, gcd_euclidean_of_timed, gcd_stein_of, gcd_stein_of_timed
)
from pkgs.observability import MetricsCollector

from .config import get_default_config

logger = logging.getLogger(__name__)

# name -> (untimed, timed)
ALGORITHMS: Dict[str, Tuple[Callable[..., int], Callable[..., TimedGcd]]] = {
    'euclidean': (gcd_euclidean_of, gcd_euclidean_of_timed),
    'stein': (gcd_stein_of, gcd_stein_of_timed),
}


def get_algorithm(name: str) -> Tuple[Callable[..., int], Callable[..., TimedGcd]]:
    """Look up the untimed and timed sequence entry points for an algorithm."""
    try:
        return ALGORITHMS[name.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown algorithm: {name!r} (expected one of {sorted(ALGORITHMS)})"
        ) from None


@dataclass
class GcdRequest:
    """Request parameters for a single GCD computation."""
    operands: Sequence[int]
    algorithm: Optional[str] = None
    timed: Optional[bool] = None


@dataclass
class GcdResult:
    """Result from a single GCD computation."""
    success: bool
    value: Optional[int]
    algorithm: str
    elapsed_ticks: Optional[int] = None
    error: Optional[str] = None
    message: Optional[str] = None


class GcdService:
    """High-level service wrapper for the GCD engine."""
    
    def __init__(self, cfg: Optional[Dict[str, Any]] = None):
        self.cfg = cfg if cfg is not None else get_default_config()
        engine_cfg = self.cfg.get('engine', {})
        self.default_algorithm = engine_cfg.get('default_algorithm', 'euclidean')
        self.default_timed = bool(engine_cfg.get('timed', False))
        self.metrics: Optional[MetricsCollector] = (
            MetricsCollector() if engine_cfg.get('enable_metrics', True) else None
        )
        
        logger.info(f"GcdService created (default algorithm: {self.default_algorithm})")

    def compute(self, req: GcdRequest) -> GcdResult:
        """Compute the GCD for a request; invalid input yields a failed result."""
        algorithm = str(req.algorithm or self.default_algorithm).lower()
        timed = self.default_timed if req.timed is None else req.timed

        try:
            untimed_fn, timed_fn = get_algorithm(algorithm)
        except ValueError as e:
            logger.error(str(e))
            self._count(algorithm, 'failures')
            return GcdResult(
                success=False,
                value=None,
                algorithm=algorithm,
                error='UnknownAlgorithm',
                message=str(e)
            )

        try:
            if timed:
                outcome = timed_fn(req.operands)
                value, elapsed = outcome.value, outcome.elapsed_ticks
            else:
                value, elapsed = untimed_fn(req.operands), None
        except (GcdError, TypeError) as e:
            logger.warning(f"{algorithm} GCD rejected operands: {e}")
            self._count(algorithm, 'failures')
            return GcdResult(
                success=False,
                value=None,
                algorithm=algorithm,
                error=type(e).__name__,
                message=str(e)
            )

        self._count(algorithm, 'calls')
        if elapsed is not None and self.metrics:
            self.metrics.add_ticks(algorithm, elapsed)

        return GcdResult(
            success=True,
            value=value,
            algorithm=algorithm,
            elapsed_ticks=elapsed,
            message=f"GCD computed by {algorithm}"
        )

    def _count(self, algorithm: str, kind: str):
        if self.metrics:
            self.metrics.increment_counter(f"{algorithm}.{kind}")

    def snapshot(self) -> Dict[str, Any]:
        """Return a summary of the calls served so far."""
        if not self.metrics:
            return {'metrics_enabled': False}
        return {
            'metrics_enabled': True,
            'default_algorithm': self.default_algorithm,
            **self.metrics.get_all_metrics(),
            'summary': self.metrics.summary_stats()
        }

    def reset(self) -> Dict[str, Any]:
        """Clear collected metrics."""
        if self.metrics:
            self.metrics.reset()
        logger.info("GcdService metrics reset")
        return {'success': True, 'message': 'Metrics reset'}
