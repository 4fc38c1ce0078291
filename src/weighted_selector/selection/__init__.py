"""Weighted selection subsystem for weighted-selector.

Two interchangeable strategies share the :class:`WeightedCollection`
contract: the block-index :class:`WeightedSelector` (O(log n) draws) and
the :class:`LinearScanSelector` (O(n) draws, simpler bookkeeping).
"""

from weighted_selector.selection.base import WeightedCollection
from weighted_selector.selection.block_index import WeightedSelector
from weighted_selector.selection.linear_scan import LinearScanSelector
from weighted_selector.selection.registry import SelectionStrategyRegistry
from weighted_selector.selection.types import Entry, SelectionResult

__all__ = [
    "Entry",
    "LinearScanSelector",
    "SelectionResult",
    "SelectionStrategyRegistry",
    "WeightedCollection",
    "WeightedSelector",
]
