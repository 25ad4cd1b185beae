"""Tolerance filtering and ranking of scored divider solutions."""

from typing import Iterable, List, Tuple

from divider.scoring import Solution

DEFAULT_LIMIT = 10


def ranking_key(solution: Solution) -> Tuple[float, int, float]:
    """Lowest error first, then fewest resistors, then lowest power."""
    return (solution.error_percent, solution.component_count, solution.power_watts)


def rank_solutions(
    candidates: Iterable[Solution],
    tolerance_percent: float,
    limit: int = DEFAULT_LIMIT,
) -> List[Solution]:
    """
    Keep candidates within tolerance and return the best `limit` of them.

    The tolerance boundary is inclusive. Candidates with equal keys keep
    their input order (list.sort is stable).
    """
    passing = [s for s in candidates if s.error_percent <= tolerance_percent]
    passing.sort(key=ranking_key)
    return passing[:max(limit, 0)]
