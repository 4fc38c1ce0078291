"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single weighted draw.

    Attributes:
        timestamp_ns: Wall-clock time of the draw (nanoseconds since epoch).
        strategy: Name of the selection strategy that served the draw.
        random_source: Name of the random source that produced the draw.
        draw: The integer drawn from ``[1, total_weight]``.
        total_weight: Sum of all weights at the time of the draw.
        num_entries: Number of entries in the collection.
        item_repr: ``repr()`` of the selected item.
        weight: Weight of the selected entry.
        block_start: First integer of the selected entry's block.
        select_ms: Time spent inside the draw (milliseconds).
    """

    timestamp_ns: int
    strategy: str
    random_source: str

    draw: int
    total_weight: int
    num_entries: int

    item_repr: str
    weight: int
    block_start: int

    select_ms: float
