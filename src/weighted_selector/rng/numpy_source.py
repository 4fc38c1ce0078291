"""Instance-local pseudo-random source backed by ``numpy.random.Generator``.

This is the default source. Each instance owns its own PCG64 generator, so
selectors never contend on shared generator state, and a fixed seed gives
fully reproducible draw sequences.

numpy draws are bounded by int64. Wider ranges (totals above ``2**63 - 1``)
go to a ``random.Random`` seeded once from the instance's own generator, so
they stay reproducible under the same seed.
"""

from __future__ import annotations

import random

import numpy as np

from weighted_selector.rng.base import RandomSource
from weighted_selector.rng.registry import register_random_source

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """``numpy.random.default_rng`` wrapper.

    Args:
        seed: Optional seed. ``None`` seeds from fresh OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self._wide_rng: random.Random | None = None

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        """Seed this source was created with, if any."""
        return self._seed

    def _draw(self, low: int, high: int) -> int:
        if _INT64_MIN <= low and high <= _INT64_MAX:
            return int(self._rng.integers(low, high, endpoint=True))

        if self._wide_rng is None:
            self._wide_rng = random.Random(int(self._rng.integers(0, _INT64_MAX)))
        return self._wide_rng.randint(low, high)

    def close(self) -> None:
        """No-op: no resources to release."""
