"""Workload generation — synthetic cylinder requests.

A workload is the full batch of cylinder requests a scheduling policy
must service.  Every policy in a run sees the *same* workload, so it is
immutable: FCFS reads it in arrival order, SCAN and C-SCAN sort their
own private copies.

Requests are sampled uniformly at random across the disk.  Each
``WorkloadGenerator`` owns its own ``random.Random`` instance, so a
seeded generator always produces the same workload and two generators
never share random state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from py_disk.geometry import DiskGeometry


class InvalidWorkloadSizeError(ValueError):
    """Raise when asked for a workload with no requests."""


@dataclass(frozen=True)
class Workload:
    """An ordered, immutable batch of cylinder requests.

    Attributes:
        requests: Cylinder numbers in arrival order.

    """

    requests: tuple[int, ...]

    def __len__(self) -> int:
        """Return the number of requests."""
        return len(self.requests)

    def __iter__(self) -> Iterator[int]:
        """Iterate over requests in arrival order."""
        return iter(self.requests)

    def __getitem__(self, index: int) -> int:
        """Return the request at *index*."""
        return self.requests[index]

    def preview(self, count: int = 10) -> tuple[list[int], list[int]]:
        """Return the first and last *count* requests.

        When the workload holds ``2 * count`` requests or fewer the
        whole workload comes back as the head and the tail is empty,
        so nothing is shown twice.
        """
        if len(self.requests) <= 2 * count:
            return list(self.requests), []
        return list(self.requests[:count]), list(self.requests[-count:])


class WorkloadGenerator:
    """Produce uniformly distributed cylinder requests.

    Args:
        seed: Optional seed for reproducible workloads.

    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Create a generator with its own random source."""
        self._seed = seed
        self._rng = random.Random(seed)  # noqa: S311

    @property
    def seed(self) -> int | None:
        """Return the seed this generator was created with."""
        return self._seed

    def generate(self, count: int, geometry: DiskGeometry) -> Workload:
        """Sample *count* requests uniformly from ``[0, geometry.size)``.

        Raises:
            InvalidWorkloadSizeError: If *count* is not positive.

        """
        if count <= 0:
            msg = f"Workload size must be positive, got {count}"
            raise InvalidWorkloadSizeError(msg)
        return Workload(tuple(self._rng.randrange(geometry.size) for _ in range(count)))
