"""Abstract base class for all uniform-random-integer sources.

Every random source, whether the OS CSPRNG, a seeded numpy generator, or a
scripted test double, implements this interface. The ABC validates draw
bounds in :meth:`RandomSource.randint` and provides a concrete
``health_check()``. Subclasses implement ``name``, ``is_available``,
``_draw()`` and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from weighted_selector.exceptions import InvalidArgumentError


class RandomSource(ABC):
    """Abstract base for uniform integer generators over closed ranges."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'numpy'``, ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently produce draws."""

    def randint(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high]``, both inclusive.

        Args:
            low: Smallest value that may be returned.
            high: Largest value that may be returned.

        Returns:
            A Python ``int`` in ``[low, high]``.

        Raises:
            InvalidArgumentError: If ``low > high``.
            RandomSourceUnavailableError: If the source cannot draw.
        """
        if low > high:
            raise InvalidArgumentError(f"Empty draw range: low={low} > high={high}")
        return self._draw(low, high)

    @abstractmethod
    def _draw(self, low: int, high: int) -> int:
        """Draw from ``[low, high]``; bounds are already validated."""

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the source."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
