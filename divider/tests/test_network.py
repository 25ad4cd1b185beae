"""
Tests for arm resistance and network construction.

Validates:
1. Series sum and parallel harmonic combination
2. Single-resistor arms are mode independent
3. Degenerate arms are rejected
"""

import math

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from divider.network import Arm, Network, CombinationMode, effective_resistance
from divider.errors import DegenerateArm

SERIES = CombinationMode.SERIES
PARALLEL = CombinationMode.PARALLEL


class TestEffectiveResistance:
    """Test series and parallel combination."""

    def test_series_sum(self):
        assert effective_resistance([1000.0, 2000.0], SERIES) == pytest.approx(3000.0)

    def test_series_other_pair(self):
        assert effective_resistance([500.0, 1500.0], SERIES) == pytest.approx(2000.0)

    def test_parallel_equal_pair(self):
        """Two equal resistors in parallel halve the value."""
        assert effective_resistance([2000.0, 2000.0], PARALLEL) == pytest.approx(1000.0)

    def test_parallel_unequal_pair(self):
        """1k ∥ 4k = 800Ω."""
        assert effective_resistance([1000.0, 4000.0], PARALLEL) == pytest.approx(800.0)

    def test_parallel_below_smallest_member(self):
        assert effective_resistance([470.0, 100000.0], PARALLEL) < 470.0

    def test_single_member_either_mode(self):
        assert effective_resistance([3000.0], SERIES) == 3000.0
        assert effective_resistance([3000.0], PARALLEL) == pytest.approx(3000.0)

    def test_zero_member_raises(self):
        with pytest.raises(DegenerateArm):
            effective_resistance([0.0, 1000.0], PARALLEL)

    def test_negative_member_raises(self):
        with pytest.raises(DegenerateArm):
            effective_resistance([-100.0, 1000.0], SERIES)

    def test_infinite_member_raises(self):
        with pytest.raises(DegenerateArm):
            effective_resistance([math.inf, 1000.0], PARALLEL)

    def test_empty_raises(self):
        with pytest.raises(DegenerateArm):
            effective_resistance([], SERIES)

    def test_degenerate_is_value_error(self):
        with pytest.raises(ValueError):
            effective_resistance([0.0], SERIES)


class TestArm:
    """Test Arm construction and properties."""

    def test_series_arm(self):
        arm = Arm((1000.0, 2000.0), SERIES)
        assert arm.size == 2
        assert arm.resistance == pytest.approx(3000.0)

    def test_parallel_arm(self):
        arm = Arm((2000.0, 2000.0), PARALLEL)
        assert arm.resistance == pytest.approx(1000.0)

    def test_single_arm_normalised_to_series(self):
        arm = Arm((3000.0,), PARALLEL)
        assert arm.mode == SERIES
        assert arm.resistance == 3000.0

    def test_single_constructor(self):
        assert Arm.single(4700.0) == Arm((4700.0,), SERIES)

    def test_values_become_tuple_of_floats(self):
        arm = Arm([1000, 2200], 'series')
        assert arm.values == (1000.0, 2200.0)
        assert arm.mode == SERIES

    def test_too_many_members_raises(self):
        with pytest.raises(ValueError):
            Arm((100.0, 200.0, 300.0), SERIES)

    def test_no_members_raises(self):
        with pytest.raises(ValueError):
            Arm((), SERIES)

    def test_zero_member_degenerate_on_use(self):
        arm = Arm((0.0, 1000.0), PARALLEL)
        with pytest.raises(DegenerateArm):
            arm.resistance

    def test_immutable(self):
        arm = Arm.single(100.0)
        with pytest.raises(AttributeError):
            arm.values = (200.0,)

    def test_hashable_and_equal(self):
        assert hash(Arm((1.0, 2.0), PARALLEL)) == hash(Arm((1.0, 2.0), PARALLEL))


class TestNetwork:
    """Test two-arm networks."""

    def test_component_count(self):
        net = Network(Arm((1000.0, 2000.0), SERIES), Arm.single(3000.0))
        assert net.component_count == 3

    def test_four_components(self):
        net = Network(Arm((1.0, 2.0), PARALLEL), Arm((3.0, 4.0), SERIES))
        assert net.component_count == 4


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
