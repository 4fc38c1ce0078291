"""Scripted random source for deterministic tests and demos.

Replays a fixed sequence of integers. Each scripted value must fall inside
the range requested by the draw that consumes it, which lets tests pin
exactly which block a selection lands in.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from weighted_selector.exceptions import InvalidArgumentError, RandomSourceUnavailableError
from weighted_selector.rng.base import RandomSource
from weighted_selector.rng.registry import register_random_source

if TYPE_CHECKING:
    from collections.abc import Iterable


@register_random_source("sequence")
class SequenceRandomSource(RandomSource):
    """Replays scripted draws in order.

    Args:
        values: Integers to return from successive draws.
        cycle: Restart from the first value once the sequence is used up
            instead of becoming unavailable.
    """

    def __init__(self, values: Iterable[int] = (), cycle: bool = False) -> None:
        self._values = [int(v) for v in values]
        self._pending: deque[int] = deque(self._values)
        self._cycle = cycle
        self.draw_count = 0

    @property
    def name(self) -> str:
        """Return ``'sequence'``."""
        return "sequence"

    @property
    def is_available(self) -> bool:
        """``True`` while scripted values remain (always, when cycling)."""
        return bool(self._pending) or (self._cycle and bool(self._values))

    def _draw(self, low: int, high: int) -> int:
        if not self._pending:
            if not (self._cycle and self._values):
                raise RandomSourceUnavailableError("Scripted sequence exhausted")
            self._pending.extend(self._values)

        value = self._pending.popleft()
        if not low <= value <= high:
            raise InvalidArgumentError(
                f"Scripted value {value} is outside the requested range [{low}, {high}]"
            )
        self.draw_count += 1
        return value

    def close(self) -> None:
        """Drop any remaining scripted values."""
        self._pending.clear()
