"""Metrics collection for GCD service calls."""

from typing import Dict, Any


class MetricsCollector:
    """Counters, tick totals and free-form metrics for one service instance."""
    
    def __init__(self):
        self.metrics: Dict[str, Any] = {}
        self.counters: Dict[str, int] = {}
        self.ticks: Dict[str, int] = {}
    
    def set_metric(self, name: str, value: Any):
        """Set a metric value."""
        self.metrics[name] = value
    
    def increment_counter(self, name: str, delta: int = 1):
        """Increment a counter metric."""
        self.counters[name] = self.counters.get(name, 0) + delta
    
    def add_ticks(self, name: str, ticks: int):
        """Accumulate elapsed monotonic ticks under a name."""
        self.ticks[name] = self.ticks.get(name, 0) + int(ticks)
    
    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all collected metrics."""
        return {
            "metrics": self.metrics.copy(),
            "counters": self.counters.copy(),
            "ticks": self.ticks.copy()
        }
    
    def reset(self):
        """Reset all metrics."""
        self.metrics.clear()
        self.counters.clear()
        self.ticks.clear()
    
    def summary_stats(self) -> Dict[str, Any]:
        """Get summary statistics."""
        return {
            "total_metrics": len(self.metrics),
            "total_counters": len(self.counters),
            "counter_sum": sum(self.counters.values()),
            "ticks_total": sum(self.ticks.values())
        }
