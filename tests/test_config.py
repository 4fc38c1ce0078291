"""Tests for weighted_selector.config.

Covers:
- Default values
- Environment variable loading (monkeypatch)
- resolve_config merge logic
- validate_overrides rejects unknown and infrastructure fields
"""

from __future__ import annotations

import pytest

from weighted_selector.config import SelectorConfig, resolve_config, validate_overrides
from weighted_selector.exceptions import ConfigValidationError


class TestSelectorConfigDefaults:
    """Verify default values."""

    def test_defaults(self) -> None:
        cfg = SelectorConfig(_env_file=None)
        assert cfg.random_source_type == "numpy"
        assert cfg.fallback_mode == "system"
        assert cfg.strategy == "block_index"
        assert cfg.seed is None
        assert cfg.log_level == "none"
        assert cfg.diagnostic_mode is False

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WS_STRATEGY", "linear_scan")
        monkeypatch.setenv("WS_SEED", "17")
        monkeypatch.setenv("WS_DIAGNOSTIC_MODE", "true")
        cfg = SelectorConfig(_env_file=None)
        assert cfg.strategy == "linear_scan"
        assert cfg.seed == 17
        assert cfg.diagnostic_mode is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WS_STRATEGY", "linear_scan")
        cfg = SelectorConfig(_env_file=None, strategy="block_index")
        assert cfg.strategy == "block_index"


class TestResolveConfig:
    """Merging ws_-prefixed overrides into a new config."""

    def test_none_returns_defaults(self, silent_config: SelectorConfig) -> None:
        assert resolve_config(silent_config, None) is silent_config

    def test_unprefixed_keys_ignored(self, silent_config: SelectorConfig) -> None:
        assert resolve_config(silent_config, {"strategy": "linear_scan"}) is silent_config

    def test_override_applied(self, silent_config: SelectorConfig) -> None:
        resolved = resolve_config(silent_config, {"ws_strategy": "linear_scan"})
        assert resolved.strategy == "linear_scan"
        assert silent_config.strategy == "block_index"

    def test_override_coerced(self, silent_config: SelectorConfig) -> None:
        resolved = resolve_config(silent_config, {"ws_seed": "99"})
        assert resolved.seed == 99

    def test_infrastructure_override_rejected(self, silent_config: SelectorConfig) -> None:
        with pytest.raises(ConfigValidationError, match="infrastructure"):
            resolve_config(silent_config, {"ws_random_source_type": "system"})

    def test_unknown_override_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config field"):
            validate_overrides({"ws_bogus": 1})
