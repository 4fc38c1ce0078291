"""Tests for the LinearScanSelector."""

from __future__ import annotations

from weighted_selector.rng.mock import SequenceRandomSource
from weighted_selector.selection.linear_scan import LinearScanSelector


class TestOrdering:
    """Entries are ordered heaviest first, ties in insertion order."""

    def test_sorted_by_weight_descending(self) -> None:
        selector: LinearScanSelector[str] = LinearScanSelector()
        selector.insert_all([("A", 5), ("B", 20), ("C", 5), ("D", 8)])
        assert [e.item for e in selector] == ["B", "D", "A", "C"]
        assert selector.blocks() == [(1, 20), (21, 28), (29, 33), (34, 38)]

    def test_ties_keep_insertion_order(self) -> None:
        selector: LinearScanSelector[str] = LinearScanSelector()
        selector.insert_all([("first", 3), ("second", 3), ("third", 3)])
        assert [e.item for e in selector] == ["first", "second", "third"]

    def test_reorders_after_remove(self) -> None:
        selector: LinearScanSelector[str] = LinearScanSelector()
        selector.insert_all([("A", 1), ("B", 9), ("C", 4)])
        selector.remove("B")
        assert [e.item for e in selector] == ["C", "A"]
        assert selector.blocks() == [(1, 4), (5, 5)]


class TestScan:
    """Draws resolve by walking cumulative blocks."""

    def test_heaviest_owns_low_draws(self) -> None:
        source = SequenceRandomSource([1, 20, 21, 28, 29])
        selector: LinearScanSelector[str] = LinearScanSelector(random_source=source)
        selector.insert_all([("A", 5), ("B", 20), ("D", 8)])
        assert [selector.select() for _ in range(5)] == ["B", "B", "D", "D", "A"]

    def test_name(self) -> None:
        assert LinearScanSelector.name == "linear_scan"
