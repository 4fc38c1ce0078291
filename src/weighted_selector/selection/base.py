"""Base class for weighted-random-selection collections.

Defines the shared selection contract: argument validation, read-only
queries, and the draw-then-locate template behind ``select()``. Concrete
strategies decide how entries are stored and how a drawn integer is mapped
back to its entry.

Every collection keeps its entries in ascending ``block_start`` order with
blocks tiling ``[1, total_weight]`` exactly. Duplicate items are separate
entries; :meth:`WeightedCollection.remove` drops all of them at once.
"""

from __future__ import annotations

import logging
import numbers
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from weighted_selector.exceptions import EmptyCollectionError, InvalidArgumentError
from weighted_selector.logging.types import SelectionRecord
from weighted_selector.rng.numpy_source import NumpyRandomSource
from weighted_selector.selection.types import Entry, SelectionResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from weighted_selector.logging.logger import SelectionLogger
    from weighted_selector.rng.base import RandomSource

logger = logging.getLogger("weighted_selector")

T = TypeVar("T")


class WeightedCollection(ABC, Generic[T]):
    """Abstract weighted-random-selection container.

    Not internally synchronized: callers sharing an instance across threads
    must provide their own locking.

    Args:
        random_source: Source of uniform integer draws. Defaults to an
            instance-local :class:`NumpyRandomSource`.
        selection_logger: Optional per-draw diagnostic logger.
    """

    name: ClassVar[str] = ""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        self._random = random_source if random_source is not None else NumpyRandomSource()
        self._selection_logger = selection_logger
        self._entries: list[Entry[T]] = []
        self._total_weight = 0

    # --- Strategy hooks ---

    @abstractmethod
    def _add_entry(self, item: T, weight: int) -> None:
        """Store a new entry; arguments are already validated."""

    @abstractmethod
    def _remove_all(self, item: T) -> list[Entry[T]]:
        """Drop every entry equal to *item*, re-densify, return the dropped entries."""

    @abstractmethod
    def _reset(self) -> None:
        """Drop all entries."""

    @abstractmethod
    def _locate(self, draw: int) -> Entry[T]:
        """Return the entry whose block contains *draw*."""

    # --- Read-only queries ---

    @property
    def random_source(self) -> RandomSource:
        """The random source draws are taken from."""
        return self._random

    @property
    def selection_logger(self) -> SelectionLogger | None:
        """The per-draw logger, if one is attached."""
        return self._selection_logger

    @property
    def total_weight(self) -> int:
        """Sum of all entries' weights (0 when empty)."""
        return self._total_weight

    def get_total_probability(self) -> int:
        """Return the cached sum of all entries' weights."""
        return self._total_weight

    def size(self) -> int:
        """Return the number of entries, counting duplicates separately."""
        return len(self._entries)

    def is_empty(self) -> bool:
        """Return ``True`` if the collection holds no entries."""
        return not self._entries

    def contains(self, item: T) -> bool:
        """Return ``True`` if any entry's item equals *item*.

        Raises:
            InvalidArgumentError: If *item* is ``None``.
        """
        self._validate_item(item)
        return any(entry.item == item for entry in self._entries)

    def entries(self) -> list[Entry[T]]:
        """Return a snapshot of all entries in ascending block order."""
        return list(self._entries)

    def blocks(self) -> list[tuple[int, int]]:
        """Return every entry's ``(block_start, block_end)`` in block order."""
        return [(entry.block_start, entry.block_end) for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item is not None and any(entry.item == item for entry in self._entries)

    def __iter__(self) -> Iterator[Entry[T]]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._entries)}, "
            f"total_weight={self._total_weight})"
        )

    # --- Mutation ---

    def insert(self, item: T, weight: int) -> None:
        """Add *item* with probability share *weight*.

        The new entry's block is appended after all existing blocks.

        Args:
            item: Value to add. Duplicates become independent entries.
            weight: Positive integer probability share.

        Raises:
            InvalidArgumentError: If *item* is ``None`` or *weight* is not a
                positive integer. Nothing is changed in that case.
        """
        self._validate_item(item)
        weight = self._validate_weight(weight)
        self._add_entry(item, weight)
        logger.debug(
            "Inserted %r (weight=%d), total_weight=%d", item, weight, self._total_weight
        )

    def insert_all(self, items: Mapping[T, int] | Iterable[tuple[T, int]]) -> None:
        """Insert many ``(item, weight)`` pairs.

        Every pair is validated before the first one is inserted, so an
        invalid pair leaves the collection untouched.

        Args:
            items: A mapping of item to weight, or an iterable of pairs.

        Raises:
            InvalidArgumentError: If any item or weight is invalid.
        """
        pairs = list(items.items()) if isinstance(items, Mapping) else list(items)
        validated = [self._validate_pair(pair) for pair in pairs]
        for item, weight in validated:
            self._add_entry(item, weight)
        logger.debug(
            "Inserted %d entries, total_weight=%d", len(validated), self._total_weight
        )

    def remove(self, item: T) -> bool:
        """Remove every entry whose item equals *item*.

        All duplicates go together, and the remaining blocks are renumbered
        from 1 so no gap is left behind.

        Returns:
            ``True`` if at least one entry was removed, ``False`` if *item*
            was not present.

        Raises:
            InvalidArgumentError: If *item* is ``None``.
        """
        self._validate_item(item)
        removed = self._remove_all(item)
        if removed:
            logger.debug(
                "Removed %d entr%s of %r, total_weight=%d",
                len(removed),
                "y" if len(removed) == 1 else "ies",
                item,
                self._total_weight,
            )
        return bool(removed)

    def clear(self) -> None:
        """Remove all entries and reset the total weight to 0."""
        self._reset()
        logger.debug("Cleared %s", type(self).__name__)

    # --- Selection ---

    def select(self) -> T:
        """Return a random item, chosen with probability weight / total_weight.

        Raises:
            EmptyCollectionError: If the collection has no entries.
        """
        return self.select_with_details().item

    def select_with_details(self) -> SelectionResult[T]:
        """Draw once and return the selected item with the draw's details.

        Raises:
            EmptyCollectionError: If the collection has no entries.
        """
        if not self._entries:
            raise EmptyCollectionError("Cannot select an item from an empty collection")

        start = time.perf_counter()
        total = self._total_weight
        draw = self._random.randint(1, total)
        entry = self._locate(draw)
        result = SelectionResult(
            item=entry.item,
            weight=entry.weight,
            block_start=entry.block_start,
            draw=draw,
            total_weight=total,
            num_entries=len(self._entries),
        )

        if self._selection_logger is not None and self._selection_logger.enabled:
            self._selection_logger.log_selection(
                SelectionRecord(
                    timestamp_ns=time.time_ns(),
                    strategy=self.name,
                    random_source=self._random.name,
                    draw=draw,
                    total_weight=total,
                    num_entries=result.num_entries,
                    item_repr=repr(entry.item),
                    weight=entry.weight,
                    block_start=entry.block_start,
                    select_ms=(time.perf_counter() - start) * 1000.0,
                )
            )
        return result

    # --- Validation ---

    def _validate_pair(self, pair: Any) -> tuple[Any, int]:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise InvalidArgumentError(f"Expected an (item, weight) pair, got {pair!r}")
        item, weight = pair
        return self._validate_item(item), self._validate_weight(weight)

    @staticmethod
    def _validate_item(item: Any) -> Any:
        if item is None:
            raise InvalidArgumentError("Item must not be None")
        return item

    @staticmethod
    def _validate_weight(weight: Any) -> int:
        # bool is an Integral subclass but never a meaningful weight.
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise InvalidArgumentError(
                f"Weight must be an integer, got {type(weight).__name__}"
            )
        if weight <= 0:
            raise InvalidArgumentError(f"Weight must be greater than 0, got {weight}")
        return int(weight)
