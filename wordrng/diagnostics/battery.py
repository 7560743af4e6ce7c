"""
wordrng.diagnostics.battery

Statistical self-checks for a composed generator.

Design: Each check draws a fixed number of values through the public
generator API and tests them against the target distribution with
scipy.stats. A check passes when its p-value is at least the configured
significance level. These are smoke tests for the derived layer, not a
substitute for TestU01 or PractRand.
"""

import math
from typing import Callable, List, Optional, Tuple

import numpy as np
from scipy import stats

from wordrng.config.schema import DiagnosticsConfig
from wordrng.core.rng import RandomGenerator
from wordrng.core.types import CheckResult

# Shapes exercised by the Gamma checks (alpha, beta)
GAMMA_LARGE_SHAPE = (2.5, 1.5)
GAMMA_SMALL_SHAPE = (0.5, 2.0)
EXPONENTIAL_SCALE = 2.0


def _result(name: str, statistic: float, p_value: float, significance: float) -> CheckResult:
    return CheckResult(
        name=name,
        statistic=float(statistic),
        p_value=float(p_value),
        passed=bool(p_value >= significance),
    )


def check_bounded_uniformity(
    rng: RandomGenerator,
    n_draws: int,
    n_bins: int,
    significance: float,
) -> CheckResult:
    """Chi-square of bounded_int(0, n_bins) counts against uniform."""
    draws = [rng.bounded_int(0, n_bins) for _ in range(n_draws)]
    counts = np.bincount(draws, minlength=n_bins)
    statistic, p_value = stats.chisquare(counts)
    return _result("bounded_int_chi2", statistic, p_value, significance)


def check_byte_uniformity(
    rng: RandomGenerator,
    n_draws: int,
    significance: float,
) -> CheckResult:
    """Chi-square of byte values from next_bytes() against uniform."""
    data = np.frombuffer(rng.next_bytes(n_draws), dtype=np.uint8)
    counts = np.bincount(data, minlength=256)
    statistic, p_value = stats.chisquare(counts)
    return _result("bytes_chi2", statistic, p_value, significance)


def check_gaussian_moments(
    rng: RandomGenerator,
    n_draws: int,
    significance: float,
) -> Tuple[CheckResult, CheckResult]:
    """Standard normal draws: z-test on the mean, chi-square on the variance."""
    samples = np.array([rng.next_gaussian() for _ in range(n_draws)])

    z = samples.mean() * math.sqrt(n_draws)
    p_mean = 2.0 * stats.norm.sf(abs(z))

    chi2_stat = (n_draws - 1) * samples.var(ddof=1)
    df = n_draws - 1
    p_var = 2.0 * min(stats.chi2.cdf(chi2_stat, df), stats.chi2.sf(chi2_stat, df))

    return (
        _result("gaussian_mean", z, p_mean, significance),
        _result("gaussian_std", chi2_stat, min(p_var, 1.0), significance),
    )


def check_gamma_exponential(
    rng: RandomGenerator,
    n_draws: int,
    significance: float,
) -> CheckResult:
    """KS test of Gamma(1, beta) against the exponential CDF with scale beta."""
    samples = [rng.next_gamma(1.0, EXPONENTIAL_SCALE) for _ in range(n_draws)]
    statistic, p_value = stats.kstest(samples, "expon", args=(0.0, EXPONENTIAL_SCALE))
    return _result("gamma_exponential_ks", statistic, p_value, significance)


def check_gamma_shape(
    rng: RandomGenerator,
    n_draws: int,
    alpha: float,
    beta: float,
    significance: float,
    name: str,
) -> CheckResult:
    """KS test of Gamma(alpha, beta) draws against the gamma CDF."""
    samples = [rng.next_gamma(alpha, beta) for _ in range(n_draws)]
    statistic, p_value = stats.kstest(samples, "gamma", args=(alpha, 0.0, beta))
    return _result(name, statistic, p_value, significance)


def run_battery(
    rng: RandomGenerator,
    config: DiagnosticsConfig,
    log_fn: Optional[Callable[[dict], None]] = None,
) -> Tuple[CheckResult, ...]:
    """Run every check against one generator.

    Args:
        rng: Generator under test. Its state advances.
        config: Draw counts, bin count and significance level.
        log_fn: Optional metrics callback (see create_logger).

    Returns:
        Tuple of CheckResult in run order.
    """
    n = config.n_draws
    alpha = config.significance
    engine = rng.source.name

    results: List[CheckResult] = [
        check_bounded_uniformity(rng, n, config.n_bins, alpha),
        check_byte_uniformity(rng, n, alpha),
    ]
    results.extend(check_gaussian_moments(rng, n, alpha))
    results.append(check_gamma_exponential(rng, n, alpha))
    results.append(check_gamma_shape(
        rng, n, *GAMMA_LARGE_SHAPE, significance=alpha, name="gamma_large_shape_ks"
    ))
    results.append(check_gamma_shape(
        rng, n, *GAMMA_SMALL_SHAPE, significance=alpha, name="gamma_small_shape_ks"
    ))

    if log_fn is not None:
        for r in results:
            log_fn({"engine": engine, **r.to_dict()})
        log_fn({
            "engine": engine,
            "n_checks": len(results),
            "n_passed": sum(r.passed for r in results),
        })

    return tuple(results)
