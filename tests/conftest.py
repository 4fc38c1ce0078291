"""Shared pytest fixtures for weighted-selector tests.

Provides configuration objects, scripted random sources, and a
``collection_cls`` fixture that runs contract tests against every
selection strategy.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from weighted_selector.config import SelectorConfig
from weighted_selector.rng.mock import SequenceRandomSource
from weighted_selector.rng.numpy_source import NumpyRandomSource
from weighted_selector.selection.base import WeightedCollection
from weighted_selector.selection.block_index import WeightedSelector
from weighted_selector.selection.linear_scan import LinearScanSelector


@pytest.fixture
def silent_config() -> SelectorConfig:
    """Return a config with all defaults and no per-draw logging."""
    return SelectorConfig(_env_file=None, log_level="none")


@pytest.fixture
def diagnostic_config() -> SelectorConfig:
    """Return a config that keeps every selection record in memory."""
    return SelectorConfig(_env_file=None, log_level="none", diagnostic_mode=True)


@pytest.fixture
def seeded_source() -> NumpyRandomSource:
    """Return a NumpyRandomSource with a fixed seed for reproducibility."""
    return NumpyRandomSource(seed=42)


@pytest.fixture
def scripted() -> Callable[..., SequenceRandomSource]:
    """Return a factory for SequenceRandomSource instances."""

    def factory(*values: int) -> SequenceRandomSource:
        return SequenceRandomSource(values)

    return factory


@pytest.fixture(params=[WeightedSelector, LinearScanSelector], ids=["block_index", "linear_scan"])
def collection_cls(request: pytest.FixtureRequest) -> type[WeightedCollection[Any]]:
    """Each selection strategy in turn."""
    return request.param


@pytest.fixture
def check_invariants() -> Callable[[WeightedCollection[Any]], None]:
    """Return a checker for the block-tiling and weight-sum invariants."""

    def check(collection: WeightedCollection[Any]) -> None:
        entries = collection.entries()
        expected_start = 1
        for entry in entries:
            assert entry.weight > 0
            assert entry.block_start == expected_start
            expected_start = entry.block_end + 1
        assert collection.get_total_probability() == sum(e.weight for e in entries)
        assert collection.get_total_probability() == expected_start - 1
        assert collection.size() == len(entries)

    return check
