"""
E-series standard resistor values and engineering notation.

Builds the catalog of stocked resistor values for the E6, E12 and E24
series over a ten-decade span (0.01Ω to 91MΩ), clipped to a requested
range, and formats resistances for display.
"""

from typing import List

from divider.errors import UnknownSeries

# E-series base values (multiplied by decades to get full range)
# These are the standard IEC 60063 values per decade (1.0 to <10.0)

E6_BASE = [1.0, 1.5, 2.2, 3.3, 4.7, 6.8]

E12_BASE = [1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2]

E24_BASE = [
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
]

E_SERIES = {
    'E6': tuple(E6_BASE),
    'E12': tuple(E12_BASE),
    'E24': tuple(E24_BASE),
}

# Decade exponents covered by the catalog: 10^-2 .. 10^7
DECADE_MIN = -2
DECADE_MAX = 7

# SI prefix table
_SI_PREFIXES = [
    (1e-15, 'f'),
    (1e-12, 'p'),
    (1e-9,  'n'),
    (1e-6,  'µ'),
    (1e-3,  'm'),
    (1e0,   ''),
    (1e3,   'k'),
    (1e6,   'M'),
    (1e9,   'G'),
]


def series_names() -> List[str]:
    """Names of the recognised E-series tables."""
    return list(E_SERIES.keys())


def generate_catalog(series: str, r_min: float, r_max: float) -> List[float]:
    """
    Generate the sorted list of standard resistor values in [r_min, r_max].

    Each base value of the series is multiplied by every power of ten from
    10^-2 through 10^7. Products are rounded to 6 decimal places so that
    e.g. 3.3 * 1000 compares equal to 3300.

    Args:
        series: 'E6', 'E12' or 'E24'
        r_min: Lower bound in Ohms (inclusive)
        r_max: Upper bound in Ohms (inclusive)

    Returns:
        Ascending list of values in Ohms. Empty when r_min > r_max.

    Raises:
        UnknownSeries: if the series name is not recognised.
    """
    if series not in E_SERIES:
        raise UnknownSeries(
            f"Unknown series '{series}'. Must be one of: {series_names()}"
        )

    base_values = E_SERIES[series]
    values = []
    for decade in range(DECADE_MIN, DECADE_MAX + 1):
        multiplier = 10.0 ** decade
        for base in base_values:
            value = round(base * multiplier, 6)
            if r_min <= value <= r_max:
                values.append(value)
    return values


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value in engineering notation with SI prefix.

    Examples:
        engineering_notation(1000, 'Ω')     → '1kΩ'
        engineering_notation(4700, 'Ω')     → '4.7kΩ'
        engineering_notation(0.047, 'Ω')    → '47mΩ'
        engineering_notation(2.2e6, 'Ω')    → '2.2MΩ'
    """
    if value == 0:
        return f"0{unit}"

    abs_value = abs(value)
    sign = '-' if value < 0 else ''

    for scale, prefix in reversed(_SI_PREFIXES):
        if abs_value >= scale:
            scaled = round(abs_value / scale, 9)
            if scaled == int(scaled):
                return f"{sign}{int(scaled)}{prefix}{unit}"
            return f"{sign}{scaled:.{precision}g}{prefix}{unit}"

    # Fallback for extremely small values
    return f"{value:.{precision}g}{unit}"


def format_resistance(ohms: float) -> str:
    """Fixed-precision resistance display: '4.70 kΩ', '1.50 MΩ', '220.0 Ω'."""
    if ohms >= 1_000_000:
        return f"{ohms / 1_000_000:.2f} MΩ"
    if ohms >= 1000:
        return f"{ohms / 1000:.2f} kΩ"
    return f"{ohms:.1f} Ω"
