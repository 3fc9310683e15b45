"""py-disk — compare classic disk-head scheduling policies.

Re-exports public symbols so callers can write::

    from py_disk import DiskGeometry, SCANPolicy, WorkloadGenerator
"""

from py_disk.config import ConfigError, SimulationConfig, load_config
from py_disk.disk import (
    CSCANPolicy,
    DiskPolicy,
    FCFSPolicy,
    SCANPolicy,
    SortedStops,
    SweepLegs,
    build_sorted_stops,
)
from py_disk.geometry import DiskGeometry, OutOfRangeError
from py_disk.simulation import SimulationResult, Simulator
from py_disk.workload import InvalidWorkloadSizeError, Workload, WorkloadGenerator

__all__ = [
    "CSCANPolicy",
    "ConfigError",
    "DiskGeometry",
    "DiskPolicy",
    "FCFSPolicy",
    "InvalidWorkloadSizeError",
    "OutOfRangeError",
    "SCANPolicy",
    "SimulationConfig",
    "SimulationResult",
    "Simulator",
    "SortedStops",
    "SweepLegs",
    "Workload",
    "WorkloadGenerator",
    "build_sorted_stops",
    "load_config",
]
