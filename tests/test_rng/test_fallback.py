"""Tests for FallbackRandomSource."""

from __future__ import annotations

import logging

import pytest

from weighted_selector.exceptions import RandomSourceUnavailableError
from weighted_selector.rng.base import RandomSource
from weighted_selector.rng.fallback import FallbackRandomSource
from weighted_selector.rng.mock import SequenceRandomSource


class _AlwaysFailSource(RandomSource):
    """Test double: always raises RandomSourceUnavailableError."""

    @property
    def name(self) -> str:
        return "always_fail"

    @property
    def is_available(self) -> bool:
        return False

    def _draw(self, low: int, high: int) -> int:
        raise RandomSourceUnavailableError("always fails")

    def close(self) -> None:
        pass


class _RuntimeErrorSource(RandomSource):
    """Test double: always raises RuntimeError (not RandomSourceUnavailableError)."""

    @property
    def name(self) -> str:
        return "runtime_error"

    @property
    def is_available(self) -> bool:
        return True

    def _draw(self, low: int, high: int) -> int:
        raise RuntimeError("unexpected error")

    def close(self) -> None:
        pass


class TestFallbackRandomSource:
    """Failover only on RandomSourceUnavailableError."""

    def test_uses_primary_when_available(self) -> None:
        source = FallbackRandomSource(SequenceRandomSource([2]), SequenceRandomSource([1]))
        assert source.randint(1, 3) == 2
        assert source.last_source_used == "sequence"

    def test_falls_back_on_unavailable(self, caplog: pytest.LogCaptureFixture) -> None:
        fallback = SequenceRandomSource([3])
        source = FallbackRandomSource(_AlwaysFailSource(), fallback)
        with caplog.at_level(logging.WARNING, logger="weighted_selector"):
            assert source.randint(1, 3) == 3
        assert source.last_source_used == "sequence"
        assert "falling back" in caplog.text

    def test_other_errors_propagate(self) -> None:
        source = FallbackRandomSource(_RuntimeErrorSource(), SequenceRandomSource([1]))
        with pytest.raises(RuntimeError, match="unexpected error"):
            source.randint(1, 1)

    def test_both_fail_raises(self) -> None:
        source = FallbackRandomSource(_AlwaysFailSource(), _AlwaysFailSource())
        with pytest.raises(RandomSourceUnavailableError):
            source.randint(1, 1)

    def test_name_is_compound(self) -> None:
        source = FallbackRandomSource(_AlwaysFailSource(), SequenceRandomSource())
        assert source.name == "always_fail+sequence"

    def test_health_check_reports_both(self) -> None:
        source = FallbackRandomSource(_AlwaysFailSource(), SequenceRandomSource([1]))
        health = source.health_check()
        assert health["healthy"] is True
        assert health["primary"] == {"source": "always_fail", "healthy": False}
        assert health["fallback"] == {"source": "sequence", "healthy": True}
        assert health["last_source_used"] == "always_fail"
