"""Fallback random source: composition wrapper with transparent failover.

``FallbackRandomSource`` wraps a *primary* and a *fallback* source. When the
primary raises :class:`~weighted_selector.exceptions.RandomSourceUnavailableError`,
the wrapper delegates to the fallback. All other exceptions propagate
unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from weighted_selector.exceptions import RandomSourceUnavailableError
from weighted_selector.rng.base import RandomSource

logger = logging.getLogger("weighted_selector")


class FallbackRandomSource(RandomSource):
    """Tries the primary source, falls back on ``RandomSourceUnavailableError``.

    Args:
        primary: The preferred random source.
        fallback: The source to use when the primary is unavailable.
    """

    def __init__(self, primary: RandomSource, fallback: RandomSource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used: str = primary.name

    @property
    def name(self) -> str:
        """Return a compound name: ``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        """Returns ``True`` if either the primary or fallback is available."""
        return self._primary.is_available or self._fallback.is_available

    @property
    def last_source_used(self) -> str:
        """Name of the source that produced the last draw."""
        return self._last_source_used

    def _draw(self, low: int, high: int) -> int:
        try:
            value = self._primary.randint(low, high)
            self._last_source_used = self._primary.name
            return value
        except RandomSourceUnavailableError:
            logger.warning(
                "Primary random source %r unavailable, falling back to %r",
                self._primary.name,
                self._fallback.name,
            )
            value = self._fallback.randint(low, high)
            self._last_source_used = self._fallback.name
            return value

    def close(self) -> None:
        """Close both primary and fallback sources."""
        self._primary.close()
        self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        """Return health status for both sources."""
        return {
            "source": self.name,
            "healthy": self.is_available,
            "primary": self._primary.health_check(),
            "fallback": self._fallback.health_check(),
            "last_source_used": self._last_source_used,
        }
