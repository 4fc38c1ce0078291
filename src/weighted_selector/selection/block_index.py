"""Block-index weighted selector with logarithmic selection.

Each entry owns a contiguous block of integers, sized by its weight:

    A(5) B(5) C(4) D(1)  ->  [1-5] [6-10] [11-14] [15]

Only the start of each block is indexed. A draw ``r`` from
``[1, total_weight]`` belongs to the entry with the largest block start
that is <= r, found with a binary search over the sorted starts.

Insertion appends a block at the end and leaves every other block alone.
Removal renumbers all remaining blocks from 1, which costs O(n).
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from weighted_selector.selection.base import WeightedCollection
from weighted_selector.selection.registry import SelectionStrategyRegistry
from weighted_selector.selection.types import Entry

if TYPE_CHECKING:
    from weighted_selector.logging.logger import SelectionLogger
    from weighted_selector.rng.base import RandomSource

T = TypeVar("T")


@SelectionStrategyRegistry.register("block_index")
class WeightedSelector(WeightedCollection[T]):
    """Weighted random selection in O(log n) per draw.

    ``_starts[i]`` is always ``_entries[i].block_start``; both lists are
    replaced together whenever blocks move.
    """

    name = "block_index"

    def __init__(
        self,
        random_source: RandomSource | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        super().__init__(random_source=random_source, selection_logger=selection_logger)
        self._starts: list[int] = []

    def _add_entry(self, item: T, weight: int) -> None:
        entry = Entry(item=item, weight=weight, block_start=self._total_weight + 1)
        self._entries.append(entry)
        self._starts.append(entry.block_start)
        self._total_weight += weight

    def _remove_all(self, item: T) -> list[Entry[T]]:
        kept: list[Entry[T]] = []
        removed: list[Entry[T]] = []
        for entry in self._entries:
            if entry.item == item:
                removed.append(entry)
            else:
                kept.append(entry)

        if removed:
            self._rebuild(kept)
        return removed

    def _rebuild(self, entries: list[Entry[T]]) -> None:
        """Renumber blocks densely from 1, keeping the current order."""
        rebuilt: list[Entry[T]] = []
        starts: list[int] = []
        next_start = 1
        for entry in entries:
            if entry.block_start != next_start:
                entry = replace(entry, block_start=next_start)
            rebuilt.append(entry)
            starts.append(next_start)
            next_start += entry.weight

        self._entries = rebuilt
        self._starts = starts
        self._total_weight = next_start - 1

    def _reset(self) -> None:
        self._entries = []
        self._starts = []
        self._total_weight = 0

    def _locate(self, draw: int) -> Entry[T]:
        # Floor search: last block starting at or before the draw.
        entry = self._entries[bisect_right(self._starts, draw) - 1]
        assert entry.block_start <= draw <= entry.block_end, (
            f"draw {draw} not inside block [{entry.block_start}, {entry.block_end}]"
        )
        return entry
