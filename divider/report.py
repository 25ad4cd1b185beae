"""
Text, JSON and CSV renderings of divider solutions.

The summary text is what the calculation-history store keeps as the
result of a search, so its fixed decimal places must not change.
"""

import csv
import io
import json
from typing import Dict, List, Optional, Sequence

from divider.components import engineering_notation, format_resistance
from divider.network import Arm, CombinationMode
from divider.scoring import Solution

_JOINERS = {
    CombinationMode.SERIES: ' + ',
    CombinationMode.PARALLEL: ' ∥ ',
}


def solution_summary(solution: Solution) -> str:
    """History text: 'R1=[...] (… Ω), R2=[...] (… Ω), Vout=… V, Error=…%, Power=… mW'."""
    return str(solution)


def solution_line(index: int, solution: Solution) -> str:
    """One line of a numbered result list (index is 1-based)."""
    return (
        f"{index}. Vout={solution.output_voltage:.3f}V, "
        f"Error={solution.error_percent:.2f}%, "
        f"P={solution.power_mw:.2f}mW, "
        f"Elements={solution.component_count}"
    )


def arm_label(arm: Arm) -> str:
    """Compact arm description, e.g. '1kΩ + 2.2kΩ' or '2kΩ ∥ 2kΩ'."""
    return _JOINERS[arm.mode].join(engineering_notation(v, 'Ω') for v in arm.values)


def history_input(supply_voltage: float, target_voltage: float) -> str:
    """Input text stored next to a solution summary."""
    return f"Vin={supply_voltage} V, Vout_req={target_voltage} V"


def _arm_to_dict(arm: Arm, resistance: float) -> Dict:
    return {
        'values': list(arm.values),
        'mode': arm.mode.value,
        'resistance': resistance,
        'display': format_resistance(resistance),
        'label': arm_label(arm),
    }


def solution_to_dict(solution: Solution) -> Dict:
    """Plain-dict form of a solution, suitable for JSON."""
    return {
        'top': _arm_to_dict(solution.top, solution.top_resistance),
        'bottom': _arm_to_dict(solution.bottom, solution.bottom_resistance),
        'output_voltage': round(solution.output_voltage, 6),
        'error_percent': round(solution.error_percent, 6),
        'power_watts': solution.power_watts,
        'component_count': solution.component_count,
        'summary': solution_summary(solution),
    }


def export_json(solutions: Sequence[Solution], query: Optional[Dict] = None) -> str:
    """Export ranked solutions as a JSON string."""
    export_data = {
        'query': query or {},
        'solutions': [
            dict(rank=i, **solution_to_dict(s)) for i, s in enumerate(solutions, start=1)
        ],
        'generated_by': 'Divider Engine',
    }
    return json.dumps(export_data, indent=2, ensure_ascii=False)


def export_csv(solutions: Sequence[Solution]) -> str:
    """Export ranked solutions as a CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow([
        'Rank', 'R1 Values', 'R1 Mode', 'R1 (Ω)', 'R2 Values', 'R2 Mode', 'R2 (Ω)',
        'Vout (V)', 'Error (%)', 'Power (mW)', 'Elements',
    ])

    for i, s in enumerate(solutions, start=1):
        writer.writerow([
            i,
            ' '.join(f"{v:g}" for v in s.top.values),
            s.top.mode.value,
            f"{s.top_resistance:.2f}",
            ' '.join(f"{v:g}" for v in s.bottom.values),
            s.bottom.mode.value,
            f"{s.bottom_resistance:.2f}",
            f"{s.output_voltage:.3f}",
            f"{s.error_percent:.2f}",
            f"{s.power_mw:.3f}",
            s.component_count,
        ])

    return output.getvalue()


def solution_lines(solutions: Sequence[Solution]) -> List[str]:
    """Numbered result list."""
    return [solution_line(i, s) for i, s in enumerate(solutions, start=1)]
