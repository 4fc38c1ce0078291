"""Registry of random source classes, keyed by config name.

Built-in sources register themselves at import time with
``@register_random_source``. :meth:`RandomSourceRegistry.create` builds an
instance and passes the configured seed to sources that accept one.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_selector.rng.base import RandomSource

logger = logging.getLogger("weighted_selector")


class RandomSourceRegistry:
    """Maps ``random_source_type`` names to RandomSource classes."""

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Decorator that registers a source class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            if name in cls._registry:
                raise ValueError(f"Random source '{name}' is already registered")
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the source class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown random source '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def create(cls, name: str, seed: int | None = None) -> RandomSource:
        """Instantiate the source registered under *name*.

        The seed is passed only to sources whose constructor takes a
        ``seed`` argument. A seed given to any other source is dropped with
        a warning, since its draws cannot be made reproducible.

        Args:
            name: Registered source name.
            seed: Optional seed for reproducible draws.

        Raises:
            KeyError: If *name* is not registered.
        """
        source_cls = cls.get(name)
        if cls.accepts_seed(source_cls):
            return source_cls(seed=seed)  # type: ignore[call-arg]

        if seed is not None:
            logger.warning(
                "Random source %r does not support seeding; seed %d ignored", name, seed
            )
        return source_cls()

    @staticmethod
    def accepts_seed(source_cls: type[RandomSource]) -> bool:
        """Whether the class constructor takes a ``seed`` argument."""
        try:
            sig = inspect.signature(source_cls)
        except (ValueError, TypeError):
            return False
        return "seed" in sig.parameters

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered source names."""
        return sorted(cls._registry)


register_random_source = RandomSourceRegistry.register
