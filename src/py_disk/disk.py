"""Disk scheduling algorithms — measuring seek distance for a workload.

When many I/O requests are waiting, the disk arm must move between
cylinders to service them.  The dominant cost is **seek distance** —
how far the arm travels.  Disk scheduling algorithms decide the *order*
in which requests are serviced, and so how far the arm moves in total.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SCAN** — go all the way up, then all the way down (elevator).
    - **C-SCAN** — go all the way up, ride the express back to the
      ground floor, go up again.

Algorithms:
    - ``FCFSPolicy`` — simple, fair, but high total head movement.
    - ``SCANPolicy`` — bounded wait, predictable sweep.
    - ``CSCANPolicy`` — uniform wait times (no favouring middle tracks).

All policies implement the ``DiskPolicy`` protocol — the Strategy
pattern.  Each one is a pure function of ``(workload, head, geometry)``:
no state survives a call and the shared workload is never modified.

SCAN and C-SCAN both work on the same **sorted stops**: every request,
the head position and both disk boundaries, sorted ascending.  The
boundaries are where the arm turns around, so folding them in as stops
makes the turn-around distance fall out of a plain sweep.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from py_disk.geometry import DiskGeometry


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def total_movement(self, workload: Iterable[int], *, head: int) -> int:
        """Return the total head movement to service *workload*.

        Args:
            workload: Cylinder numbers in arrival order.
            head: Position of the disk head before any request is served.

        Returns:
            Sum of the absolute cylinder distances travelled.

        """
        ...


@dataclass(frozen=True)
class SortedStops:
    """Every position a sweeping head stops at, in ascending order.

    Attributes:
        stops: Requests, head and both boundaries, sorted ascending.
        head_index: Index of the head position within ``stops``.

    """

    stops: tuple[int, ...]
    head_index: int

    @property
    def head(self) -> int:
        """Return the head position."""
        return self.stops[self.head_index]


class SweepLegs(NamedTuple):
    """The two legs of a sweeping traversal."""

    first: int
    second: int

    @property
    def total(self) -> int:
        """Return the combined movement of both legs."""
        return self.first + self.second


def build_sorted_stops(
    workload: Iterable[int], head: int, geometry: DiskGeometry
) -> SortedStops:
    """Fold the head and both boundaries into the requests and sort them.

    Duplicates are kept.  If the head value appears more than once, the
    first occurrence is used; the choice does not matter because equal
    stops are zero cylinders apart.

    Raises:
        OutOfRangeError: If the head or any request is off the disk.

    """
    geometry.check(head, what="Head position")
    stops = [geometry.check(r, what="Request") for r in workload]
    stops.extend((head, geometry.first, geometry.last))
    stops.sort()
    return SortedStops(stops=tuple(stops), head_index=bisect_left(stops, head))


def _sweep_up(stops: Sequence[int]) -> int:
    """Return the distance of an ascending pass over *stops*."""
    movement = 0
    current = stops[0] if stops else 0
    for stop in stops[1:]:
        movement += stop - current
        current = stop
    return movement


def _sweep_down(stops: Sequence[int]) -> int:
    """Return the distance of a descending pass over *stops* (given ascending)."""
    movement = 0
    current = stops[-1] if stops else 0
    for stop in reversed(stops[:-1]):
        movement += current - stop
        current = stop
    return movement


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing high total head movement.  It is
    the baseline SCAN and C-SCAN are compared against.
    """

    def __init__(self, geometry: DiskGeometry) -> None:
        """Create an FCFS policy for a disk."""
        self._geometry = geometry

    def total_movement(self, workload: Iterable[int], *, head: int) -> int:
        """Sum the distance between consecutive requests, starting at *head*."""
        current = self._geometry.check(head, what="Head position")
        movement = 0
        for request in workload:
            self._geometry.check(request, what="Request")
            movement += abs(current - request)
            current = request
        return movement


class SCANPolicy:
    """SCAN (Elevator algorithm) — sweep up, then sweep down.

    The arm moves towards the outer boundary servicing every request
    on the way, then goes back down from the head to the inner
    boundary.  Both boundaries are always visited, so the total only
    depends on the set of requests, never on their arrival order.

    Args:
        geometry: The disk being scheduled.

    """

    def __init__(self, geometry: DiskGeometry) -> None:
        """Create a SCAN policy for a disk."""
        self._geometry = geometry

    def legs(self, workload: Iterable[int], *, head: int) -> SweepLegs:
        """Return the ascending and descending legs separately."""
        sorted_stops = build_sorted_stops(workload, head, self._geometry)
        stops, start = sorted_stops.stops, sorted_stops.head_index
        # Both legs start from the head position.
        return SweepLegs(
            first=_sweep_up(stops[start:]),
            second=_sweep_down(stops[: start + 1]),
        )

    def total_movement(self, workload: Iterable[int], *, head: int) -> int:
        """Return the combined movement of both SCAN legs."""
        return self.legs(workload, head=head).total


class CSCANPolicy:
    """Circular SCAN — sweep up, jump back, sweep up again.

    Unlike SCAN, C-SCAN only services requests in one direction.
    After reaching the outer boundary the arm returns to the start of
    the disk without servicing anything, and that return trip is not
    counted as movement.  The arm then sweeps upward again across the
    stops below the head.

    With regular SCAN, requests in the middle of the disk are
    favoured (the arm passes them twice per cycle).  C-SCAN
    eliminates this bias.

    Args:
        geometry: The disk being scheduled.

    """

    def __init__(self, geometry: DiskGeometry) -> None:
        """Create a C-SCAN policy for a disk."""
        self._geometry = geometry

    def legs(self, workload: Iterable[int], *, head: int) -> SweepLegs:
        """Return the first upward sweep and the wrapped second sweep."""
        sorted_stops = build_sorted_stops(workload, head, self._geometry)
        stops, start = sorted_stops.stops, sorted_stops.head_index
        # The jump back lands below stops[1]; only stops[1:start] are swept.
        return SweepLegs(
            first=_sweep_up(stops[start:]),
            second=_sweep_up(stops[1:start]),
        )

    def total_movement(self, workload: Iterable[int], *, head: int) -> int:
        """Return the C-SCAN movement, excluding the jump back."""
        return self.legs(workload, head=head).total
