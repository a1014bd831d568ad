"""Tests for the agreement checks and timing benchmark."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from diagnostics import (
    AgreementReport, random_operand_sets, reference_gcd, check_agreement, benchmark_algorithms,
    run_benchmark
)
from apps.engine import get_default_config
from pkgs.gcd_core import INT32_MIN, INT32_MAX


class TestOperandSets:
    """Test random operand generation."""
    
    def test_shape_and_range(self):
        sets = random_operand_sets(50, operands_per_set=4, seed=1)
        assert len(sets) == 50
        for operands in sets:
            assert len(operands) == 4
            assert all(-INT32_MAX <= v <= INT32_MAX for v in operands)
            assert INT32_MIN not in operands
    
    def test_never_all_zero(self):
        # magnitude 1 makes all-zero rows likely
        sets = random_operand_sets(200, operands_per_set=2, max_magnitude=1, seed=3)
        assert all(any(operands) for operands in sets)
    
    def test_deterministic_with_seed(self):
        assert random_operand_sets(10, seed=7) == random_operand_sets(10, seed=7)
    
    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            random_operand_sets(5, operands_per_set=1)
        with pytest.raises(ValueError):
            random_operand_sets(5, max_magnitude=0)


class TestAgreement:
    """Test cross-algorithm agreement checks."""
    
    def test_reference(self):
        assert reference_gcd([48, -18]) == 6
        assert reference_gcd([0, 0, 5]) == 5
    
    def test_random_sets_agree(self):
        report = check_agreement(random_operand_sets(300, operands_per_set=3, seed=11))
        assert isinstance(report, AgreementReport)
        assert report.checked == 300
        assert report.all_agree
    
    def test_small_magnitudes_agree(self):
        report = check_agreement(random_operand_sets(300, operands_per_set=5, max_magnitude=64, seed=5))
        assert report.all_agree


class TestBenchmark:
    """Test the timing comparison."""
    
    def test_benchmark_stats(self):
        sets = random_operand_sets(10, seed=2)
        results = benchmark_algorithms(sets, repeats=3)
        assert set(results) == {'euclidean', 'stein'}
        for stats in results.values():
            assert stats['calls'] == 30
            assert 0 <= stats['min_ticks'] <= stats['median_ticks'] <= stats['max_ticks']
            assert stats['min_ticks'] <= stats['mean_ticks'] <= stats['max_ticks']
    
    def test_run_from_config(self):
        cfg = get_default_config()
        cfg['benchmark'].update(samples=20, repeats=2, operands_per_set=4)
        summary = run_benchmark(cfg)
        assert summary['checked'] == 20
        assert summary['all_agree']
        assert summary['timings']['stein']['calls'] == 40

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            benchmark_algorithms([(4, 6)], repeats=0)
        with pytest.raises(ValueError):
            benchmark_algorithms([])


if __name__ == "__main__":
    pytest.main([__file__])
