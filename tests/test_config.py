"""Tests for genstack.config -- buffer growth policy."""

from __future__ import annotations

import pytest

from genstack.config import DEFAULT_GROWTH, GrowthPolicy


class TestGrowthPolicy:
    def test_default_doubles(self) -> None:
        assert [DEFAULT_GROWTH.next_capacity(c) for c in (0, 1, 2, 4, 8)] == [1, 2, 4, 8, 16]

    def test_minimum_applies_to_small_buffers(self) -> None:
        policy = GrowthPolicy(factor=2, minimum=8)
        assert policy.next_capacity(0) == 8
        assert policy.next_capacity(3) == 8
        assert policy.next_capacity(8) == 16

    def test_next_capacity_always_grows(self) -> None:
        policy = GrowthPolicy(factor=3, minimum=1)
        for capacity in range(50):
            assert policy.next_capacity(capacity) > capacity

    @pytest.mark.parametrize("factor", [-1, 0, 1])
    def test_factor_below_two_rejected(self, factor: int) -> None:
        with pytest.raises(ValueError, match="growth factor"):
            GrowthPolicy(factor=factor)

    @pytest.mark.parametrize("minimum", [-5, 0])
    def test_minimum_below_one_rejected(self, minimum: int) -> None:
        with pytest.raises(ValueError, match="minimum capacity"):
            GrowthPolicy(minimum=minimum)
