"""Registry for selection strategy implementations.

Uses a decorator pattern for registration, mirroring the random source
registry. The ``build()`` method wires a random source and optional
selection logger into the configured strategy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_selector.logging.logger import SelectionLogger
    from weighted_selector.rng.base import RandomSource
    from weighted_selector.selection.base import WeightedCollection


class SelectionStrategyRegistry:
    """Registry mapping string names to WeightedCollection classes."""

    _registry: ClassVar[dict[str, type[WeightedCollection[Any]]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[WeightedCollection[Any]]], type[WeightedCollection[Any]]]:
        """Decorator that registers a collection class under *name*.

        Args:
            name: Identifier used in config ``strategy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[WeightedCollection[Any]]) -> type[WeightedCollection[Any]]:
            if name in cls._registry:
                raise ValueError(f"Selection strategy '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[WeightedCollection[Any]]:
        """Return the collection class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selection strategy '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(
        cls,
        config: Any,
        random_source: RandomSource | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> WeightedCollection[Any]:
        """Instantiate the strategy named by *config.strategy*.

        Args:
            config: A SelectorConfig (or compatible object) with a
                ``strategy`` attribute.
            random_source: Source of uniform draws for the new collection.
            selection_logger: Optional per-draw logger.

        Returns:
            An empty collection of the configured strategy.
        """
        klass = cls.get(config.strategy)
        return klass(random_source=random_source, selection_logger=selection_logger)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry)
