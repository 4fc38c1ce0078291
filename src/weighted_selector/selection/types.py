"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Entry(Generic[T]):
    """One weighted entry and the block of integers it owns.

    Entries are immutable. When blocks move (after a removal) the collection
    builds replacement entries instead of editing ``block_start`` in place.

    Attributes:
        item: The value returned when this entry's block is drawn.
        weight: Probability share, always > 0.
        block_start: First integer of the block ``[block_start, block_end]``.
    """

    item: T
    weight: int
    block_start: int

    @property
    def block_end(self) -> int:
        """Last integer of this entry's block (inclusive)."""
        return self.block_start + self.weight - 1


@dataclass(frozen=True, slots=True)
class SelectionResult(Generic[T]):
    """Result of a single weighted draw.

    Attributes:
        item: The selected item.
        weight: Weight of the entry that owned the drawn block.
        block_start: First integer of that entry's block.
        draw: Integer drawn uniformly from ``[1, total_weight]``.
        total_weight: Sum of all weights at the time of the draw.
        num_entries: Number of entries in the collection.
    """

    item: T
    weight: int
    block_start: int
    draw: int
    total_weight: int
    num_entries: int

    @property
    def probability(self) -> float:
        """Theoretical chance this entry had of being selected."""
        return self.weight / self.total_weight
