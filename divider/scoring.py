"""
Divider solution scoring.

For a network with effective arm resistances Rtop and Rbottom:

    Vout  = Vs · Rbottom / (Rtop + Rbottom)
    error = |Vout − Vtarget| / Vtarget · 100   (%)
    P     = Vs² / (Rtop + Rbottom)             (W)

score_network() evaluates one network. score_shape_block() evaluates one
topology shape over a contiguous range of resistor tuples with numpy, and
score_shape_grid() over all of them; both use the same operation order as
the scalar scorer, so their values are bit-identical to it.
"""

import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Sequence, Tuple

import numpy as np

from divider.errors import InvalidTarget
from divider.network import Arm, CombinationMode, Network
from divider.topology import TopologyShape


def check_target(target_voltage: float) -> None:
    """Raise InvalidTarget unless the target is a positive finite voltage."""
    if not math.isfinite(target_voltage) or target_voltage <= 0:
        raise InvalidTarget(f"Target voltage must be positive, got {target_voltage}")


@dataclass(frozen=True)
class Solution:
    """A scored divider network. Arm resistances are computed once on construction."""
    top: Arm
    bottom: Arm
    output_voltage: float
    error_percent: float
    power_watts: float
    top_resistance: float = field(init=False)
    bottom_resistance: float = field(init=False)
    component_count: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'top_resistance', self.top.resistance)
        object.__setattr__(self, 'bottom_resistance', self.bottom.resistance)
        object.__setattr__(self, 'component_count', self.top.size + self.bottom.size)

    @property
    def network(self) -> Network:
        return Network(self.top, self.bottom)

    @property
    def power_mw(self) -> float:
        return self.power_watts * 1000

    def __str__(self) -> str:
        return (
            f"R1={list(self.top.values)} ({self.top_resistance:.2f} Ω), "
            f"R2={list(self.bottom.values)} ({self.bottom_resistance:.2f} Ω), "
            f"Vout={self.output_voltage:.3f} V, Error={self.error_percent:.2f}%, "
            f"Power={self.power_mw:.3f} mW"
        )


def score_network(network: Network, supply_voltage: float, target_voltage: float) -> Solution:
    """
    Score one divider network.

    Args:
        network: Top and bottom arms
        supply_voltage: Voltage across the whole divider (V)
        target_voltage: Desired tap voltage (V), must be > 0

    Returns:
        Solution with output voltage, error percentage and dissipated power.
    """
    check_target(target_voltage)

    r_top = network.top.resistance
    r_bottom = network.bottom.resistance
    total = r_top + r_bottom

    vout = supply_voltage * r_bottom / total
    error = abs(vout - target_voltage) / target_voltage * 100
    power = supply_voltage * supply_voltage / total

    return Solution(
        top=network.top,
        bottom=network.bottom,
        output_voltage=vout,
        error_percent=error,
        power_watts=power,
    )


def _arm_grid(members: Sequence[np.ndarray], mode: CombinationMode) -> np.ndarray:
    """Effective resistance of broadcast member arrays."""
    if len(members) == 1:
        return members[0]
    if mode == CombinationMode.SERIES:
        return reduce(np.add, members)
    return 1.0 / reduce(np.add, [1.0 / m for m in members])


def score_shape_block(
    values: Sequence[float],
    shape: TopologyShape,
    supply_voltage: float,
    target_voltage: float,
    start: int,
    stop: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Score a shape over the resistor tuples with flat indices [start, stop).

    Flat index k is the k-th tuple of itertools.product(values,
    repeat=shape.size). Memory use depends on stop - start only.

    Returns:
        (output_voltage, error_percent, power_watts) 1-D arrays.
    """
    check_target(target_voltage)
    if stop <= start:
        empty = np.empty(0)
        return empty, empty.copy(), empty.copy()

    pool = np.asarray(values, dtype=float)
    grid = (pool.size,) * shape.size
    indices = np.unravel_index(np.arange(start, stop), grid)

    r_top = _arm_grid([pool[indices[p]] for p in shape.top], shape.top_mode)
    r_bottom = _arm_grid([pool[indices[p]] for p in shape.bottom], shape.bottom_mode)
    total = r_top + r_bottom

    vout = supply_voltage * r_bottom / total
    error = np.abs(vout - target_voltage) / target_voltage * 100
    power = supply_voltage * supply_voltage / total
    return vout, error, power


def score_shape_grid(
    values: Sequence[float],
    shape: TopologyShape,
    supply_voltage: float,
    target_voltage: float,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Score a shape over every ordered resistor tuple drawn from `values`.

    Resistor position p varies along axis p, so each returned array has
    shape (n,) * shape.size and its C-order ravel follows the same index
    order as itertools.product(values, repeat=shape.size). Use
    score_shape_block() for pools too large to hold in one grid.

    Returns:
        (output_voltage, error_percent, power_watts) arrays.
    """
    grid = (len(values),) * shape.size
    scored = score_shape_block(values, shape, supply_voltage, target_voltage, 0, int(np.prod(grid)))
    return tuple(a.reshape(grid) for a in scored)
