"""Diagnostic logging subsystem for weighted-selector.

Provides immutable per-draw selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from weighted_selector.logging.logger import SelectionLogger
from weighted_selector.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
