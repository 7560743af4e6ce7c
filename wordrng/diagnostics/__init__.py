"""
wordrng.diagnostics

Statistical self-checks and run logging.
"""

from .logging import create_logger
from .battery import (
    run_battery,
    check_bounded_uniformity,
    check_byte_uniformity,
    check_gaussian_moments,
    check_gamma_exponential,
    check_gamma_shape,
)

__all__ = [
    "create_logger",
    "run_battery",
    "check_bounded_uniformity",
    "check_byte_uniformity",
    "check_gaussian_moments",
    "check_gamma_exponential",
    "check_gamma_shape",
]
