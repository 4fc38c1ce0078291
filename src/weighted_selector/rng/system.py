"""System random source using the OS CSPRNG.

Cryptographically secure and always available. Unlike the numpy source it
handles arbitrarily large integer bounds, but it cannot be seeded.
"""

from __future__ import annotations

import random

from weighted_selector.rng.base import RandomSource
from weighted_selector.rng.registry import register_random_source


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``random.SystemRandom`` wrapper; the default fallback source."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def _draw(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def close(self) -> None:
        """No-op: no resources to release."""
