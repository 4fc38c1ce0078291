"""Configuration system for weighted-selector.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WS_*) -> .env file -> field defaults.

Per-selector overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from override.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_selector.exceptions import ConfigValidationError

_OVERRIDE_PREFIX = "ws_"

# Fields that can be overridden when building an individual selector.
# The random source wiring is fixed per process.
_OVERRIDABLE_FIELDS: frozenset[str] = frozenset(
    {
        "strategy",
        "seed",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SelectorConfig(BaseSettings):
    """Configuration for weighted-selector.

    Resolution order: init kwargs -> env vars (WS_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: random source type and fallback mode, NOT
      overridable per selector.
    - **Selector parameters**: strategy, seed, logging. Overridable via
      ``ws_``-prefixed keys passed to :func:`resolve_config`.
    """

    model_config = SettingsConfigDict(
        env_prefix="WS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT overridable) ---

    random_source_type: str = Field(
        default="numpy",
        description="Random source identifier: 'numpy', 'system', or a plugin name",
    )
    fallback_mode: str = Field(
        default="system",
        description="Fallback random source: 'error', 'system', 'numpy'",
    )

    # --- Selection (overridable) ---

    strategy: str = Field(
        default="block_index",
        description="Selection strategy: 'block_index' or 'linear_scan'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for reproducible draws (sources that support seeding)",
    )

    # --- Logging (overridable) ---

    log_level: str = Field(
        default="none",
        description="Per-draw logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Keep every selection record in memory for analysis",
    )


_ALL_FIELDS = frozenset(SelectorConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'ws_' prefix from an override key."""
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all ws_* keys in *overrides* without creating a config.

    Args:
        overrides: Dictionary of override values, keyed with the ws_ prefix.

    Raises:
        ConfigValidationError: If any ws_* key is unknown or non-overridable.
    """
    for key in overrides:
        if not key.startswith(_OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _OVERRIDABLE_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per selector"
            )


def resolve_config(
    defaults: SelectorConfig,
    overrides: dict[str, Any] | None,
) -> SelectorConfig:
    """Create a new config instance merging defaults with overrides.

    Override keys use the 'ws_' prefix (e.g., ``'ws_strategy': 'linear_scan'``).
    Keys without the prefix are silently ignored.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-selector overrides.

    Returns:
        A new SelectorConfig with overrides applied, or *defaults* itself
        when there is nothing to apply.

    Raises:
        ConfigValidationError: If any ws_* key is unknown or non-overridable.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    updates = {
        _strip_prefix(key): value
        for key, value in overrides.items()
        if key.startswith(_OVERRIDE_PREFIX)
    }
    if not updates:
        return defaults

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(updates)
    return SelectorConfig.model_validate(merged)
