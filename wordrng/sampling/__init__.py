"""
wordrng.sampling

Derived operations built on a WordSource.

This module provides:
- BoundedSampler: unbiased integers in [lower, upper)
- ByteExtractor: byte strings and buffer fills in either byte order
- SequenceOps: choice, sample, shuffle (sync and async)
- DistributionSampler: uniform, Gaussian and Gamma variates
"""

from .bounded import BoundedSampler, rejection_threshold
from .bytestream import ByteExtractor
from .sequence import SequenceOps
from .distributions import DistributionSampler

__all__ = [
    "BoundedSampler",
    "rejection_threshold",
    "ByteExtractor",
    "SequenceOps",
    "DistributionSampler",
]
