"""
Voltage divider search.

find_solutions() is the engine's entry point: it builds the resistor
catalog, scores every candidate network of 2, 3 and 4 resistors and
returns the best ranked solutions.

Scoring walks each network size in blocks of GRID_BLOCK resistor tuples,
so memory stays flat when the index caps are raised. A running best
`max_results` in-tolerance candidates per size is kept and only those are
turned into Solution objects; since any member of the overall top-k is also in
the top-k of its own size, ranking those survivors gives the same list
as ranking every candidate from iter_candidates().
"""

import logging
from typing import Iterator, List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field

from divider.components import generate_catalog
from divider.config import EngineSettings
from divider.ranking import rank_solutions
from divider.scoring import Solution, check_target, score_network, score_shape_block
from divider.topology import candidate_pool, enumerate_networks, get_shapes

logger = logging.getLogger(__name__)

# Resistor tuples scored per numpy pass
GRID_BLOCK = 1 << 17


class DividerQuery(BaseModel):
    """Validated search inputs."""
    supply_voltage: float = Field(..., gt=0, description="Voltage across the divider (V)")
    target_voltage: float = Field(..., gt=0, description="Desired output voltage (V)")
    tolerance_percent: float = Field(..., description="Maximum output error (%)")
    series: str = Field(..., description="E-series name: E6, E12 or E24")
    r_min: float = Field(..., description="Smallest resistor value (Ohms)")
    r_max: float = Field(..., description="Largest resistor value (Ohms)")


def find_solutions(
    supply_voltage: float,
    target_voltage: float,
    tolerance_percent: float,
    series: str,
    r_min: float,
    r_max: float,
    settings: Optional[EngineSettings] = None,
) -> List[Solution]:
    """
    Find the best resistor networks producing target_voltage from supply_voltage.

    Args:
        supply_voltage: Input voltage (V)
        target_voltage: Desired output voltage (V)
        tolerance_percent: Maximum allowed output error (%), inclusive
        series: 'E6', 'E12' or 'E24'
        r_min: Smallest usable resistor (Ohms)
        r_max: Largest usable resistor (Ohms)
        settings: Search limits; defaults to EngineSettings()

    Returns:
        Up to settings.max_results solutions, best first. Empty when
        nothing is within tolerance (including a negative tolerance) or
        the value range holds no resistors (including r_min > r_max and
        r_max <= 0).

    Raises:
        InvalidTarget: target_voltage is zero, negative or not finite.
        UnknownSeries: series is not a known E-series.
        pydantic.ValidationError: supply_voltage is not positive, or an
            input is not a number.
    """
    check_target(target_voltage)
    query = DividerQuery(
        supply_voltage=supply_voltage,
        target_voltage=target_voltage,
        tolerance_percent=tolerance_percent,
        series=series,
        r_min=r_min,
        r_max=r_max,
    )
    settings = settings or EngineSettings()

    catalog = generate_catalog(query.series, query.r_min, query.r_max)
    logger.debug("%s catalog in [%g, %g]: %d values", query.series, query.r_min, query.r_max, len(catalog))

    survivors: List[Solution] = []
    for size in settings.network_sizes:
        survivors.extend(_best_of_size(catalog, size, query, settings))

    return rank_solutions(survivors, query.tolerance_percent, settings.max_results)


def _best_of_size(
    catalog: Sequence[float],
    size: int,
    query: DividerQuery,
    settings: EngineSettings,
) -> List[Solution]:
    """Best in-tolerance solutions of one network size, in ranking order."""
    shapes = get_shapes(size)
    pool = candidate_pool(catalog, size, settings.index_cap(size))
    if not pool:
        return []

    grid = (len(pool),) * size
    tuples = len(pool) ** size
    limit = settings.max_results

    # Running top-k; candidate order within a size is tuple index, then shape
    best_order = np.empty(0, dtype=np.int64)
    best_error = np.empty(0)
    best_power = np.empty(0)
    passed = 0
    for start in range(0, tuples, GRID_BLOCK):
        stop = min(start + GRID_BLOCK, tuples)
        order_parts, error_parts, power_parts = [best_order], [best_error], [best_power]
        for shape_no, shape in enumerate(shapes):
            _, error, power = score_shape_block(
                pool, shape, query.supply_voltage, query.target_voltage, start, stop,
            )
            passing = np.flatnonzero(error <= query.tolerance_percent)
            passed += passing.size
            order_parts.append((passing + start) * len(shapes) + shape_no)
            error_parts.append(error[passing])
            power_parts.append(power[passing])

        order = np.concatenate(order_parts)
        errors = np.concatenate(error_parts)
        powers = np.concatenate(power_parts)
        # lexsort sorts by the last key first
        keep = np.lexsort((order, powers, errors))[:limit]
        best_order, best_error, best_power = order[keep], errors[keep], powers[keep]

    logger.debug(
        "size %d: %d candidates from %d values, %d within %.4g%%",
        size, tuples * len(shapes), len(pool), passed, query.tolerance_percent,
    )

    solutions = []
    for candidate in best_order:
        flat, shape_no = divmod(int(candidate), len(shapes))
        resistors = [pool[i] for i in np.unravel_index(flat, grid)]
        network = shapes[shape_no].build(resistors)
        solutions.append(score_network(network, query.supply_voltage, query.target_voltage))
    return solutions


def iter_candidates(
    supply_voltage: float,
    target_voltage: float,
    series: str,
    r_min: float,
    r_max: float,
    settings: Optional[EngineSettings] = None,
) -> Iterator[Solution]:
    """
    Lazily score every candidate network, unfiltered, in enumeration order.

    rank_solutions(iter_candidates(...), tolerance) is the reference
    result of find_solutions(); it is far slower on large catalogs.
    """
    check_target(target_voltage)
    settings = settings or EngineSettings()
    catalog = generate_catalog(series, r_min, r_max)
    for size in settings.network_sizes:
        for network in enumerate_networks(catalog, size, settings.index_cap(size)):
            yield score_network(network, supply_voltage, target_voltage)
