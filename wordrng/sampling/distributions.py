"""
wordrng.sampling.distributions

Continuous distributions from a word stream.

Design:
- Uniform doubles take the top 53 bits of a 64-bit word.
- Gaussian uses the Box-Muller transform. Each transform yields two
  independent normals; the second is cached as a spare in standard units
  and handed out (then cleared) by the next call.
- Gamma picks one of three rejection samplers by shape.

The spare makes a sampler stateful beyond its WordSource. Interleaving
calls from unrelated consumers on one instance pairs their normals; give
each consumer its own sampler.
"""

import math
from typing import Optional

from wordrng.core.exceptions import RejectionLimitError
from wordrng.core.types import DOUBLE_UNIT
from wordrng.core.validation import (
    validate_finite_bounds,
    validate_max_rejections,
    validate_non_negative,
    validate_not_nan,
    validate_positive,
)
from wordrng.engines.base import WordSource

TWO_PI = 2.0 * math.pi
LOG4 = math.log(4.0)
SG_MAGICCONST = 1.0 + math.log(4.5)

# Cheng's method rejects u1 this close to 0 or 1.
CHENG_U_EPS = 1e-7


class DistributionSampler:
    """Uniform, Gaussian and Gamma variates.

    Attributes:
        max_rejections: Optional cap on rejected proposals per Gamma call.
    """

    def __init__(self, source: WordSource, max_rejections: Optional[int] = None):
        validate_max_rejections(max_rejections)
        self._source = source
        self.max_rejections = max_rejections
        self._spare: Optional[float] = None

    @property
    def has_spare(self) -> bool:
        """Whether the next next_gaussian() call will use the cached spare."""
        return self._spare is not None

    def reset(self) -> None:
        """Discard the cached Gaussian spare."""
        self._spare = None

    # ------------------------------------------------------------------
    # Uniform
    # ------------------------------------------------------------------

    def next_double(self) -> float:
        """Uniform double in [0, 1) with 53 random bits."""
        return (self._source.next64() >> 11) * DOUBLE_UNIT

    def uniform(self, lower: float, upper: float) -> float:
        """Uniform double in [lower, upper).

        Rounding can yield `upper` for very wide ranges.

        Raises:
            InvalidArgumentError: Non-finite bounds or lower >= upper.
        """
        validate_finite_bounds(lower, upper)
        return lower + (upper - lower) * self.next_double()

    def next_boolean(self) -> bool:
        """Fair coin from the top bit of one native word."""
        return (self._source.next_word() >> (self._source.word_bits - 1)) == 0

    # ------------------------------------------------------------------
    # Gaussian
    # ------------------------------------------------------------------

    def next_gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        """Normal variate with the given mean and standard deviation.

        Calls alternate between a fresh transform (two uniforms drawn, one
        spare stored) and consuming the spare (no draws).

        Raises:
            InvalidArgumentError: mean is NaN or std is negative.
        """
        validate_not_nan(mean, "mean")
        validate_non_negative(std, "std")

        spare = self._spare
        if spare is not None:
            self._spare = None
            return mean + std * spare

        u1 = self.next_double()
        u2 = self.next_double()
        theta = TWO_PI * u1
        r = math.sqrt(-2.0 * math.log(1.0 - u2))
        self._spare = r * math.sin(theta)
        return mean + std * r * math.cos(theta)

    # ------------------------------------------------------------------
    # Gamma
    # ------------------------------------------------------------------

    def next_gamma(self, alpha: float, beta: float) -> float:
        """Gamma variate with shape alpha and scale beta (mean alpha*beta).

        Args:
            alpha: Shape, > 0.
            beta: Scale, > 0.

        Raises:
            InvalidArgumentError: alpha or beta not finite and positive.
            RejectionLimitError: max_rejections is set and was exceeded.
        """
        validate_positive(alpha, "alpha")
        validate_positive(beta, "beta")

        if alpha > 1.0:
            return self._gamma_cheng(alpha) * beta
        if alpha == 1.0:
            return -math.log(1.0 - self.next_double()) * beta
        return self._gamma_gs(alpha) * beta

    def _gamma_cheng(self, alpha: float) -> float:
        """Cheng's GB algorithm for alpha > 1 (unit scale)."""
        ainv = math.sqrt(2.0 * alpha - 1.0)
        bbb = alpha - LOG4
        ccc = alpha + ainv

        rejections = 0
        while True:
            u1 = self.next_double()
            if CHENG_U_EPS < u1 < 1.0 - CHENG_U_EPS:
                u2 = 1.0 - self.next_double()
                v = math.log(u1 / (1.0 - u1)) / ainv
                x = alpha * math.exp(v)
                z = u1 * u1 * u2
                r = bbb + ccc * v - x
                if r + SG_MAGICCONST - 4.5 * z >= 0.0 or r >= math.log(z):
                    return x
            rejections += 1
            self._check_rejections(rejections)

    def _gamma_gs(self, alpha: float) -> float:
        """Ahrens-Dieter GS algorithm for 0 < alpha < 1 (unit scale)."""
        b = (math.e + alpha) / math.e

        rejections = 0
        while True:
            p = b * self.next_double()
            if p <= 1.0:
                x = p ** (1.0 / alpha)
            else:
                x = -math.log((b - p) / alpha)

            u = self.next_double()
            if p > 1.0:
                if u <= x ** (alpha - 1.0):
                    return x
            elif u <= math.exp(-x):
                return x
            rejections += 1
            self._check_rejections(rejections)

    def _check_rejections(self, rejections: int) -> None:
        if self.max_rejections is not None and rejections > self.max_rejections:
            raise RejectionLimitError(
                f"Gamma sampling rejected {rejections} proposals "
                f"(max_rejections={self.max_rejections})"
            )
