"""Uniform-random-integer sources for weighted-selector.

Re-exports the ABC, registry, and all built-in source implementations::

    from weighted_selector.rng import RandomSource, RandomSourceRegistry
    from weighted_selector.rng import NumpyRandomSource, SystemRandomSource
"""

from weighted_selector.rng.base import RandomSource
from weighted_selector.rng.fallback import FallbackRandomSource
from weighted_selector.rng.mock import SequenceRandomSource
from weighted_selector.rng.numpy_source import NumpyRandomSource
from weighted_selector.rng.registry import RandomSourceRegistry, register_random_source
from weighted_selector.rng.system import SystemRandomSource

__all__ = [
    "FallbackRandomSource",
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "SequenceRandomSource",
    "SystemRandomSource",
    "register_random_source",
]
