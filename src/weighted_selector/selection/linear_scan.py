"""Linear-scan weighted selector.

A simpler alternative to the block index for small collections or
mutation-heavy workloads. Entries are kept sorted by weight, heaviest
first, and every mutation renumbers all blocks. A draw walks the blocks
until it reaches the one containing it, so the common (heavy) items are
found after only a few steps.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from weighted_selector.exceptions import InvalidStateError
from weighted_selector.selection.base import WeightedCollection
from weighted_selector.selection.registry import SelectionStrategyRegistry
from weighted_selector.selection.types import Entry

T = TypeVar("T")


@SelectionStrategyRegistry.register("linear_scan")
class LinearScanSelector(WeightedCollection[T]):
    """Weighted random selection in O(n) per draw, O(n log n) per mutation.

    Equal-weight entries keep their insertion order.
    """

    name = "linear_scan"

    def _add_entry(self, item: T, weight: int) -> None:
        self._rebuild([*self._entries, Entry(item=item, weight=weight, block_start=0)])

    def _remove_all(self, item: T) -> list[Entry[T]]:
        removed = [entry for entry in self._entries if entry.item == item]
        if removed:
            self._rebuild([entry for entry in self._entries if entry.item != item])
        return removed

    def _rebuild(self, entries: list[Entry[T]]) -> None:
        # sorted() is stable, also with reverse=True.
        ordered = sorted(entries, key=lambda entry: entry.weight, reverse=True)
        rebuilt: list[Entry[T]] = []
        next_start = 1
        for entry in ordered:
            rebuilt.append(replace(entry, block_start=next_start))
            next_start += entry.weight

        self._entries = rebuilt
        self._total_weight = next_start - 1

    def _reset(self) -> None:
        self._entries = []
        self._total_weight = 0

    def _locate(self, draw: int) -> Entry[T]:
        for entry in self._entries:
            if draw <= entry.block_end:
                return entry
        raise InvalidStateError(f"Draw {draw} is outside [1, {self._total_weight}]")
