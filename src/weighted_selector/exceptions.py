"""Exception hierarchy for weighted-selector.

All exceptions derive from WeightedSelectorError, enabling broad catch
patterns at the application boundary while allowing fine-grained handling
internally. Argument and state errors also subclass the matching builtin
(``ValueError`` / ``RuntimeError``) so generic callers keep working.
"""


class WeightedSelectorError(Exception):
    """Base exception for all weighted-selector errors."""


class InvalidArgumentError(WeightedSelectorError, ValueError):
    """A caller-supplied argument violates a precondition.

    Raised for ``None`` items, non-integer or non-positive weights, and
    inverted random-draw bounds. Always raised before any state changes.
    """


class InvalidStateError(WeightedSelectorError, RuntimeError):
    """The collection is in a state that does not permit the operation."""


class EmptyCollectionError(InvalidStateError):
    """select() was called on a collection with no entries."""


class RandomSourceUnavailableError(WeightedSelectorError):
    """A random source cannot produce a draw.

    This is the only error that triggers failover in
    :class:`~weighted_selector.rng.fallback.FallbackRandomSource`.
    """


class ConfigValidationError(WeightedSelectorError):
    """Configuration override validation failed.

    Raised when overrides contain unknown keys or attempt to change
    infrastructure fields that are fixed for the lifetime of a selector.
    """
