"""Diagnostic logger for per-draw selection events.

Uses the standard ``logging`` module with the ``"weighted_selector"``
logger. No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc frequency analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weighted_selector.config import SelectorConfig
    from weighted_selector.logging.types import SelectionRecord

logger = logging.getLogger("weighted_selector")


class SelectionLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per draw with the draw, block and item.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory so observed selection
    frequencies can be compared against the configured weights.
    """

    def __init__(self, config: SelectorConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether records are emitted or stored at all."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the draw.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "summary":
            logger.info(
                "draw=%d/%d block=[%d,%d] item=%s entries=%d strategy=%s source=%s time=%.3fms",
                record.draw,
                record.total_weight,
                record.block_start,
                record.block_start + record.weight - 1,
                record.item_repr,
                record.num_entries,
                record.strategy,
                record.random_source,
                record.select_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
            ``frequencies`` maps each selected item's repr to the share of
            draws it received.
        """
        if not self._records:
            return {}

        n = len(self._records)
        counts = Counter(r.item_repr for r in self._records)
        select_times = [r.select_ms for r in self._records]
        return {
            "total_selections": n,
            "counts": dict(counts),
            "frequencies": {item: count / n for item, count in counts.items()},
            "mean_draw": sum(r.draw for r in self._records) / n,
            "mean_select_ms": sum(select_times) / n,
            "max_select_ms": max(select_times),
        }

    def clear(self) -> None:
        """Drop all stored records."""
        self._records.clear()
