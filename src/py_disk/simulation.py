"""Simulation runner — one workload, every policy, one comparison.

The simulator ties a disk geometry, a workload generator and the three
scheduling policies together.  A run generates a single workload and
hands the *same* immutable workload to each policy, so the totals are
directly comparable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from py_disk.disk import CSCANPolicy, DiskPolicy, FCFSPolicy, SCANPolicy
from py_disk.logging import Logger, LogLevel
from py_disk.workload import WorkloadGenerator

if TYPE_CHECKING:
    from py_disk.config import SimulationConfig
    from py_disk.geometry import DiskGeometry
    from py_disk.workload import Workload


@dataclass(frozen=True)
class SimulationResult:
    """The outcome of one simulation run.

    Attributes:
        head: Initial head position.
        workload: The requests every policy serviced.
        totals: Total head movement per policy name, in run order.

    """

    head: int
    workload: Workload
    totals: dict[str, int] = field(default_factory=lambda: {})  # noqa: PIE807


class Simulator:
    """Run every scheduling policy against a shared workload.

    Usage::

        simulator = Simulator(SimulationConfig(seed=1))
        result = simulator.run(2500)
        result.totals["SCAN"]

    """

    def __init__(
        self,
        config: SimulationConfig,
        *,
        generator: WorkloadGenerator | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a simulator for a configuration.

        Args:
            config: Disk size, workload length and seed.
            generator: Workload source; defaults to one seeded from *config*.
            logger: Run log; a fresh one is created if omitted.

        """
        self._config = config
        self._geometry = config.geometry
        self._generator = generator or WorkloadGenerator(seed=config.seed)
        self._logger = logger or Logger()
        self._policies: dict[str, DiskPolicy] = {
            "FCFS": FCFSPolicy(self._geometry),
            "SCAN": SCANPolicy(self._geometry),
            "C-SCAN": CSCANPolicy(self._geometry),
        }

    @property
    def config(self) -> SimulationConfig:
        """Return the configuration."""
        return self._config

    @property
    def geometry(self) -> DiskGeometry:
        """Return the simulated disk geometry."""
        return self._geometry

    @property
    def logger(self) -> Logger:
        """Return the run log."""
        return self._logger

    @property
    def policies(self) -> dict[str, DiskPolicy]:
        """Return the policies by display name, in run order."""
        return dict(self._policies)

    def run(self, head: int, *, workload: Workload | None = None) -> SimulationResult:
        """Generate a workload (unless given) and measure every policy.

        Raises:
            OutOfRangeError: If *head* is off the disk.  Nothing is
                generated or computed in that case.

        """
        self._geometry.check(head, what="Head position")
        if workload is None:
            workload = self._generator.generate(self._config.request_count, self._geometry)
            self._logger.log(
                LogLevel.DEBUG,
                f"generated {len(workload)} requests (seed={self._generator.seed})",
                source="workload",
            )

        totals: dict[str, int] = {}
        for name, policy in self._policies.items():
            totals[name] = policy.total_movement(workload, head=head)
            self._logger.log(
                LogLevel.INFO,
                f"{name} moved {totals[name]} cylinders from head {head}",
                source="scheduler",
            )
        return SimulationResult(head=head, workload=workload, totals=totals)
