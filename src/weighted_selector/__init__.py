"""weighted-selector: weighted random selection with logarithmic draws.

Items carry positive integer weights; each draw returns an item with
probability proportional to its weight. The default block-index strategy
resolves a draw with a binary search over contiguous weight blocks.

Example::

    from weighted_selector import WeightedSelector

    selector = WeightedSelector()
    selector.insert("A", 50)
    selector.insert("B", 25)
    selector.select()
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-selector")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_selector.config import SelectorConfig, resolve_config, validate_overrides
from weighted_selector.exceptions import (
    ConfigValidationError,
    EmptyCollectionError,
    InvalidArgumentError,
    InvalidStateError,
    RandomSourceUnavailableError,
    WeightedSelectorError,
)
from weighted_selector.factory import build_random_source, build_selector
from weighted_selector.selection import (
    Entry,
    LinearScanSelector,
    SelectionResult,
    WeightedCollection,
    WeightedSelector,
)

__all__ = [
    "ConfigValidationError",
    "EmptyCollectionError",
    "Entry",
    "InvalidArgumentError",
    "InvalidStateError",
    "LinearScanSelector",
    "RandomSourceUnavailableError",
    "SelectionResult",
    "SelectorConfig",
    "WeightedCollection",
    "WeightedSelector",
    "WeightedSelectorError",
    "__version__",
    "build_random_source",
    "build_selector",
    "resolve_config",
    "validate_overrides",
]
