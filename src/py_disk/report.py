"""Report formatting — turn a simulation result into console lines.

Formatting is kept apart from printing so the CLI owns all output and
the lines can be checked in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from py_disk.simulation import SimulationResult
    from py_disk.workload import Workload


def format_preview(workload: Workload, count: int = 10) -> str:
    """Return the first and last *count* requests, elided in the middle."""
    head, tail = workload.preview(count)
    text = " ".join(str(r) for r in head)
    if tail:
        text += " ... " + " ".join(str(r) for r in tail)
    return text


def format_report(result: SimulationResult, *, preview_count: int = 10) -> list[str]:
    """Return the report lines for one simulation run."""
    lines = [
        "Generated cylinder requests:",
        format_preview(result.workload, preview_count),
        f"Initial head position: {result.head}",
    ]
    lines.extend(
        f"Total head movement using {name}: {total} cylinders"
        for name, total in result.totals.items()
    )
    return lines
