"""Registry-based factory for constructing selectors from config.

This module is the central wiring point: it maps string identifiers from
:class:`SelectorConfig` to concrete classes. Adding a new random source or
selection strategy only requires writing the class and registering it.

Component construction:
    - ``build_random_source(config)`` assembles the random source chain,
      including the ``FallbackRandomSource`` wrapper when the config's
      fallback mode is not ``"error"``.
    - ``build_selection_logger(config)`` returns a logger only when
      per-draw logging or diagnostics are switched on.
    - ``build_selector(config)`` puts the pieces together.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from weighted_selector.config import SelectorConfig, resolve_config
from weighted_selector.logging.logger import SelectionLogger
from weighted_selector.rng.fallback import FallbackRandomSource
from weighted_selector.rng.numpy_source import NumpyRandomSource
from weighted_selector.rng.registry import RandomSourceRegistry
from weighted_selector.rng.system import SystemRandomSource
from weighted_selector.selection.registry import SelectionStrategyRegistry

if TYPE_CHECKING:
    from weighted_selector.rng.base import RandomSource
    from weighted_selector.selection.base import WeightedCollection

logger = logging.getLogger("weighted_selector")


def build_random_source(config: SelectorConfig) -> RandomSource:
    """Build the random source from config, wrapping with fallback if needed.

    Args:
        config: Configuration specifying source type, seed and fallback mode.

    Returns:
        A RandomSource, potentially wrapped in FallbackRandomSource.

    Raises:
        KeyError: If ``random_source_type`` is not registered.
    """
    primary = RandomSourceRegistry.create(config.random_source_type, seed=config.seed)

    if config.fallback_mode == "error":
        return primary

    if config.fallback_mode == "numpy":
        fallback: RandomSource = NumpyRandomSource()
    else:
        if config.fallback_mode != "system":
            logger.warning(
                "Unknown fallback_mode %r, using system fallback",
                config.fallback_mode,
            )
        fallback = SystemRandomSource()

    return FallbackRandomSource(primary, fallback)


def build_selection_logger(config: SelectorConfig) -> SelectionLogger | None:
    """Return a SelectionLogger, or ``None`` when it would do nothing."""
    if config.log_level == "none" and not config.diagnostic_mode:
        return None
    return SelectionLogger(config)


def build_selector(
    config: SelectorConfig | None = None,
    overrides: dict[str, Any] | None = None,
) -> WeightedCollection[Any]:
    """Build an empty selector wired according to *config*.

    Args:
        config: Base configuration. Loaded from the environment if omitted.
        overrides: Optional ``ws_``-prefixed overrides, see
            :func:`~weighted_selector.config.resolve_config`.

    Returns:
        An empty collection of the configured strategy.

    Raises:
        ConfigValidationError: If *overrides* contain invalid keys.
        KeyError: If the strategy or random source is not registered.
    """
    if config is None:
        config = SelectorConfig()
    config = resolve_config(config, overrides)

    selector = SelectionStrategyRegistry.build(
        config,
        random_source=build_random_source(config),
        selection_logger=build_selection_logger(config),
    )
    logger.debug(
        "Built %s with random source %r",
        type(selector).__name__,
        selector.random_source.name,
    )
    return selector
