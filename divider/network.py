"""
Resistor arms and two-arm divider networks.

An arm is one side of the divider: one resistor, or two resistors
combined in series (resistances add) or parallel (conductances add).
A network is the pair (top, bottom):

    supply ── top ──┬── bottom ── ground
                    └── output
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from divider.errors import DegenerateArm

MAX_ARM_SIZE = 2


class CombinationMode(str, Enum):
    SERIES = "series"
    PARALLEL = "parallel"


def effective_resistance(values: Sequence[float], mode: CombinationMode) -> float:
    """
    Effective resistance of resistors combined in series or parallel.

    Series:   R = R1 + R2 + ...
    Parallel: R = 1 / (1/R1 + 1/R2 + ...)

    Raises:
        DegenerateArm: if there are no members, a member is not a positive
            finite value, or the combination is zero or infinite.
    """
    if not values:
        raise DegenerateArm("Arm has no resistors")

    for v in values:
        if not math.isfinite(v) or v <= 0:
            raise DegenerateArm(f"Resistor values must be positive and finite, got {v}")

    if mode == CombinationMode.SERIES:
        resistance = sum(values)
    else:
        conductance = sum(1.0 / v for v in values)
        if conductance == 0 or not math.isfinite(conductance):
            raise DegenerateArm(f"Parallel combination of {list(values)} is degenerate")
        resistance = 1.0 / conductance

    if not math.isfinite(resistance) or resistance <= 0:
        raise DegenerateArm(f"Arm {list(values)} reduces to {resistance}Ω")
    return resistance


@dataclass(frozen=True)
class Arm:
    """One side of a divider: 1-2 resistor values and how they are combined."""
    values: Tuple[float, ...]
    mode: CombinationMode = CombinationMode.SERIES

    def __post_init__(self):
        values = tuple(float(v) for v in self.values)
        if not 1 <= len(values) <= MAX_ARM_SIZE:
            raise ValueError(
                f"An arm holds 1 to {MAX_ARM_SIZE} resistors, got {len(values)}"
            )
        object.__setattr__(self, 'values', values)
        mode = CombinationMode(self.mode)
        # Series is canonical for a lone resistor
        if len(values) == 1:
            mode = CombinationMode.SERIES
        object.__setattr__(self, 'mode', mode)

    @classmethod
    def single(cls, value: float) -> 'Arm':
        return cls((value,))

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def resistance(self) -> float:
        return effective_resistance(self.values, self.mode)


@dataclass(frozen=True)
class Network:
    """A two-arm voltage divider."""
    top: Arm
    bottom: Arm

    @property
    def component_count(self) -> int:
        return self.top.size + self.bottom.size
