"""
Divider topology shapes and candidate network enumeration.

A shape says which of the n chosen resistors go into the top arm and
which into the bottom arm, and how each arm combines its members. The
registry below is deliberately a fixed subset of all two-arm partitions:
one shape for 2 resistors, four for 3 and three for 4. Adding a shape
changes the ranked output, so extend it on purpose only.

Sizes 3 and 4 only draw from the first 50 / 30 catalog entries, which
keeps the search at roughly 0.5M / 2.4M candidates.
"""

import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from divider.network import Arm, CombinationMode, Network

SERIES = CombinationMode.SERIES
PARALLEL = CombinationMode.PARALLEL


@dataclass(frozen=True)
class TopologyShape:
    """Assignment of resistor positions to the two arms."""
    name: str
    top: Tuple[int, ...]        # positions into the chosen resistor tuple
    top_mode: CombinationMode
    bottom: Tuple[int, ...]
    bottom_mode: CombinationMode
    description: str

    @property
    def size(self) -> int:
        return len(self.top) + len(self.bottom)

    def build(self, resistors: Sequence[float]) -> Network:
        """Place the chosen resistor values into a Network of this shape."""
        return Network(
            top=Arm(tuple(resistors[p] for p in self.top), self.top_mode),
            bottom=Arm(tuple(resistors[p] for p in self.bottom), self.bottom_mode),
        )


SHAPES: Dict[int, Tuple[TopologyShape, ...]] = {
    2: (
        TopologyShape('r1|r2', (0,), SERIES, (1,), SERIES,
                      'Classic two-resistor divider'),
    ),
    3: (
        TopologyShape('r1|r2+r3', (0,), SERIES, (1, 2), SERIES,
                      'Single top resistor, series bottom pair'),
        TopologyShape('r1|r2//r3', (0,), SERIES, (1, 2), PARALLEL,
                      'Single top resistor, parallel bottom pair'),
        TopologyShape('r1+r2|r3', (0, 1), SERIES, (2,), SERIES,
                      'Series top pair, single bottom resistor'),
        TopologyShape('r1//r2|r3', (0, 1), PARALLEL, (2,), SERIES,
                      'Parallel top pair, single bottom resistor'),
    ),
    4: (
        TopologyShape('r1+r2|r3+r4', (0, 1), SERIES, (2, 3), SERIES,
                      'Series pairs in both arms'),
        TopologyShape('r1//r2|r3//r4', (0, 1), PARALLEL, (2, 3), PARALLEL,
                      'Parallel pairs in both arms'),
        TopologyShape('r1+r2|r3//r4', (0, 1), SERIES, (2, 3), PARALLEL,
                      'Series top pair, parallel bottom pair'),
    ),
}

# Number of leading catalog entries drawn from, per network size (None = all)
INDEX_CAPS: Dict[int, Optional[int]] = {
    2: None,
    3: 50,
    4: 30,
}

NETWORK_SIZES = tuple(SHAPES.keys())

_DEFAULT = object()


def get_shapes(size: int) -> Tuple[TopologyShape, ...]:
    """Get the shape list for a network size."""
    if size not in SHAPES:
        raise ValueError(f"Unsupported network size {size}. Available: {list(NETWORK_SIZES)}")
    return SHAPES[size]


def list_shapes(size: Optional[int] = None) -> List[Dict]:
    """List all shapes, optionally only those of one network size."""
    result = []
    for shape_size, shapes in SHAPES.items():
        if size is not None and shape_size != size:
            continue
        for shape in shapes:
            result.append({
                'name': shape.name,
                'size': shape_size,
                'description': shape.description,
                'top': {'positions': list(shape.top), 'mode': shape.top_mode.value},
                'bottom': {'positions': list(shape.bottom), 'mode': shape.bottom_mode.value},
            })
    return result


def candidate_pool(values: Sequence[float], size: int, index_cap=_DEFAULT) -> List[float]:
    """
    Catalog entries a network of the given size may draw from.

    Args:
        values: Catalog values (ascending)
        size: Network size (2, 3 or 4)
        index_cap: Override for INDEX_CAPS[size]; None disables the cap.
    """
    get_shapes(size)
    cap = INDEX_CAPS[size] if index_cap is _DEFAULT else index_cap
    if cap is None:
        return list(values)
    return list(values[:max(cap, 0)])


def enumerate_networks(
    values: Sequence[float],
    size: int,
    index_cap=_DEFAULT,
) -> Iterator[Network]:
    """
    Lazily yield every candidate network of the given size.

    Ordered resistor tuples are drawn with repetition from the candidate
    pool in lexicographic index order; each tuple is placed into every
    shape of the size, in registry order.
    """
    shapes = get_shapes(size)
    pool = candidate_pool(values, size, index_cap)
    for resistors in itertools.product(pool, repeat=size):
        for shape in shapes:
            yield shape.build(resistors)
