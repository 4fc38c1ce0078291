"""Tests for NumpyRandomSource."""

from __future__ import annotations

import pytest

from weighted_selector.exceptions import InvalidArgumentError
from weighted_selector.rng.numpy_source import NumpyRandomSource


class TestNumpyRandomSource:
    """Tests for the numpy Generator wrapper."""

    def test_name(self) -> None:
        assert NumpyRandomSource().name == "numpy"

    def test_is_always_available(self) -> None:
        assert NumpyRandomSource().is_available is True

    def test_draws_within_inclusive_bounds(self) -> None:
        source = NumpyRandomSource(seed=1)
        draws = {source.randint(1, 3) for _ in range(300)}
        assert draws == {1, 2, 3}

    def test_returns_python_int(self) -> None:
        assert type(NumpyRandomSource(seed=1).randint(1, 10)) is int

    def test_degenerate_range(self) -> None:
        source = NumpyRandomSource()
        assert all(source.randint(5, 5) == 5 for _ in range(10))

    def test_same_seed_same_sequence(self) -> None:
        a = NumpyRandomSource(seed=123)
        b = NumpyRandomSource(seed=123)
        assert [a.randint(1, 1000) for _ in range(20)] == [b.randint(1, 1000) for _ in range(20)]

    def test_seed_property(self) -> None:
        assert NumpyRandomSource(seed=9).seed == 9
        assert NumpyRandomSource().seed is None

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Empty draw range"):
            NumpyRandomSource().randint(2, 1)

    def test_range_beyond_int64(self) -> None:
        source = NumpyRandomSource()
        for _ in range(50):
            assert 1 <= source.randint(1, 2**64) <= 2**64

    def test_range_beyond_int64_reproducible(self) -> None:
        a = NumpyRandomSource(seed=8)
        b = NumpyRandomSource(seed=8)
        assert [a.randint(1, 2**80) for _ in range(10)] == [b.randint(1, 2**80) for _ in range(10)]

    def test_wide_draws_cover_upper_half(self) -> None:
        source = NumpyRandomSource(seed=4)
        high = 2**70
        draws = [source.randint(1, high) for _ in range(200)]
        assert any(d > 2**63 for d in draws)
        assert any(d <= high // 2 for d in draws)

    def test_mixed_narrow_and_wide_draws(self) -> None:
        source = NumpyRandomSource(seed=5)
        assert 1 <= source.randint(1, 2**65) <= 2**65
        assert 1 <= source.randint(1, 10) <= 10
        assert 1 <= source.randint(1, 2**65) <= 2**65

    def test_health_check(self) -> None:
        assert NumpyRandomSource().health_check() == {"source": "numpy", "healthy": True}

    def test_close_is_noop(self) -> None:
        NumpyRandomSource().close()  # Should not raise.
