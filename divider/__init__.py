"""
Divider Engine

Resistor voltage-divider search: picks 2-4 standard E-series resistors,
arranged as series/parallel arms, that produce a target output voltage
within tolerance, ranked by error, part count and power.

All math is deterministic and side-effect free.
"""

from divider.errors import DividerError, UnknownSeries, DegenerateArm, InvalidTarget
from divider.components import generate_catalog, engineering_notation, format_resistance
from divider.network import Arm, Network, CombinationMode, effective_resistance
from divider.topology import TopologyShape, enumerate_networks, get_shapes, list_shapes
from divider.scoring import Solution, score_network
from divider.ranking import rank_solutions
from divider.config import EngineSettings
from divider.search import find_solutions, iter_candidates
from divider.report import solution_summary, solution_line, export_csv, export_json

__version__ = "0.1.0"
