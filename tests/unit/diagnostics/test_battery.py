"""
Tests for wordrng.diagnostics.battery
"""

import math

import pytest

from wordrng.config.schema import DiagnosticsConfig
from wordrng.core.rng import RandomGenerator
from wordrng.core.types import CheckResult
from wordrng.diagnostics.battery import (
    check_bounded_uniformity,
    check_byte_uniformity,
    check_gaussian_moments,
    check_gamma_exponential,
    check_gamma_shape,
    run_battery,
)

EXPECTED_CHECKS = [
    "bounded_int_chi2",
    "bytes_chi2",
    "gaussian_mean",
    "gaussian_std",
    "gamma_exponential_ks",
    "gamma_large_shape_ks",
    "gamma_small_shape_ks",
]


@pytest.fixture
def small_config():
    return DiagnosticsConfig(n_draws=5_000, n_bins=6, significance=1e-4)


class TestChecks:
    """Individual checks return sane CheckResults."""

    def test_bounded_uniformity(self):
        result = check_bounded_uniformity(RandomGenerator.from_seed(1), 5_000, 6, 1e-4)
        assert result.name == "bounded_int_chi2"
        assert 0.0 <= result.p_value <= 1.0
        assert result.passed

    def test_byte_uniformity(self):
        result = check_byte_uniformity(RandomGenerator.from_seed(2), 20_000, 1e-4)
        assert result.passed

    def test_gaussian_moments(self):
        mean_result, std_result = check_gaussian_moments(RandomGenerator.from_seed(3), 5_000, 1e-4)
        assert mean_result.name == "gaussian_mean"
        assert std_result.name == "gaussian_std"
        assert mean_result.passed and std_result.passed

    def test_gamma_exponential(self):
        result = check_gamma_exponential(RandomGenerator.from_seed(4), 5_000, 1e-4)
        assert result.passed

    def test_gamma_shape(self):
        result = check_gamma_shape(RandomGenerator.from_seed(5), 5_000, 3.0, 2.0, 1e-4, "g")
        assert result.name == "g"
        assert result.passed

    def test_significance_one_minus_eps_fails_most(self):
        # At a level just below 1, a check passes only if p is ~1
        result = check_bounded_uniformity(RandomGenerator.from_seed(1), 5_000, 6, 0.999999)
        assert not result.passed


class TestRunBattery:
    """Tests for run_battery."""

    def test_returns_every_check(self, small_config):
        results = run_battery(RandomGenerator.from_seed(42), small_config)
        assert [r.name for r in results] == EXPECTED_CHECKS
        assert all(isinstance(r, CheckResult) for r in results)

    def test_good_engine_passes(self, small_config):
        results = run_battery(RandomGenerator.from_seed(42, engine="pcg32"), small_config)
        assert all(r.passed for r in results)

    def test_deterministic(self, small_config):
        a = run_battery(RandomGenerator.from_seed(7), small_config)
        b = run_battery(RandomGenerator.from_seed(7), small_config)
        assert [r.statistic for r in a] == [r.statistic for r in b]

    def test_log_fn_receives_metrics(self, small_config):
        logged = []
        results = run_battery(RandomGenerator.from_seed(42), small_config, log_fn=logged.append)
        assert len(logged) == len(results) + 1
        assert logged[0]["check"] == "bounded_int_chi2"
        assert logged[0]["engine"] == "xoshiro256**"
        assert logged[-1]["n_checks"] == len(results)

    def test_statistics_finite(self, small_config):
        results = run_battery(RandomGenerator.from_seed(3, engine="sfc32"), small_config)
        assert all(math.isfinite(r.statistic) for r in results)
