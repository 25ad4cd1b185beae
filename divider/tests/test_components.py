"""
Tests for the E-series resistor catalog and engineering notation.

Validates:
1. Catalog contents for E6, E12, E24 over a value range
2. Inclusive bounds and empty ranges
3. Unknown series rejection
4. Engineering notation and fixed resistance formatting
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from divider.components import (
    generate_catalog,
    engineering_notation,
    format_resistance,
    series_names,
    E6_BASE,
    E12_BASE,
    E24_BASE,
)
from divider.errors import UnknownSeries


class TestGenerateCatalog:
    """Test catalog generation."""

    def test_e12_two_decades(self):
        """E12 from 100Ω to 10kΩ: two full decades plus 10k itself."""
        values = generate_catalog('E12', 100, 10000)
        assert len(values) == 25
        assert values[0] == 100.0
        assert values[-1] == 10000.0
        assert 4700.0 in values
        assert 3300.0 in values

    def test_e6_values(self):
        values = generate_catalog('E6', 1000, 100000)
        assert values == [
            1000.0, 1500.0, 2200.0, 3300.0, 4700.0, 6800.0,
            10000.0, 15000.0, 22000.0, 33000.0, 47000.0, 68000.0,
            100000.0,
        ]

    def test_sorted_ascending(self):
        values = generate_catalog('E24', 0, 1e9)
        assert values == sorted(values)

    def test_full_span(self):
        """Ten decades from 0.01Ω up to 9.1MΩ·10 (91MΩ)."""
        values = generate_catalog('E24', 0, 1e9)
        assert len(values) == 24 * 10
        assert values[0] == pytest.approx(0.01)
        assert values[-1] == pytest.approx(91e6)

    def test_bounds_inclusive(self):
        values = generate_catalog('E12', 1200, 1800)
        assert values == [1200.0, 1500.0, 1800.0]

    def test_rounding_keeps_exact_upper_bound(self):
        """3.3 * 1000 must land on 3300 exactly so rMax=3300 includes it."""
        assert generate_catalog('E6', 3300, 3300) == [3300.0]

    def test_no_values_in_range(self):
        assert generate_catalog('E6', 1100, 1400) == []

    def test_min_greater_than_max_is_empty(self):
        assert generate_catalog('E12', 10000, 100) == []

    def test_all_positive(self):
        assert all(v > 0 for v in generate_catalog('E24', 0, 1e9))

    def test_unknown_series_raises(self):
        with pytest.raises(UnknownSeries):
            generate_catalog('E96', 100, 1000)

    def test_unknown_series_is_value_error(self):
        with pytest.raises(ValueError):
            generate_catalog('e12', 100, 1000)

    def test_series_names(self):
        assert series_names() == ['E6', 'E12', 'E24']


class TestESeriesCompleteness:
    """Verify the E-series arrays are complete and sorted."""

    def test_counts(self):
        assert len(E6_BASE) == 6
        assert len(E12_BASE) == 12
        assert len(E24_BASE) == 24

    def test_sorted(self):
        for base in (E6_BASE, E12_BASE, E24_BASE):
            assert base == sorted(base)

    def test_range(self):
        for base in (E6_BASE, E12_BASE, E24_BASE):
            assert base[0] == 1.0
            assert base[-1] < 10.0

    def test_e6_subset_of_e12_subset_of_e24(self):
        assert set(E6_BASE) <= set(E12_BASE) <= set(E24_BASE)


class TestEngineeringNotation:
    """Test engineering notation formatting."""

    def test_kilo(self):
        assert engineering_notation(1000, 'Ω') == '1kΩ'

    def test_mega(self):
        assert engineering_notation(1e6, 'Ω') == '1MΩ'

    def test_fractional_kilo(self):
        assert engineering_notation(4700, 'Ω') == '4.7kΩ'

    def test_catalog_value(self):
        """Catalog products like 2.2 * 1000 format without float noise."""
        assert engineering_notation(generate_catalog('E12', 2200, 2200)[0], 'Ω') == '2.2kΩ'

    def test_milli(self):
        assert engineering_notation(0.047, 'Ω') == '47mΩ'

    def test_plain_ohms(self):
        assert engineering_notation(220, 'Ω') == '220Ω'

    def test_zero(self):
        assert engineering_notation(0, 'Ω') == '0Ω'

    def test_negative(self):
        assert engineering_notation(-1000, 'Ω') == '-1kΩ'


class TestFormatResistance:
    """Test fixed-precision resistance display."""

    def test_ohms(self):
        assert format_resistance(220) == '220.0 Ω'

    def test_kilo_ohms(self):
        assert format_resistance(4700) == '4.70 kΩ'

    def test_mega_ohms(self):
        assert format_resistance(1.5e6) == '1.50 MΩ'

    def test_threshold(self):
        assert format_resistance(1000) == '1.00 kΩ'
        assert format_resistance(999.9) == '999.9 Ω'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
