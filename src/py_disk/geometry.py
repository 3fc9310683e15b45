"""Disk geometry — the range of cylinders a head can visit.

A disk platter is divided into concentric tracks; stacked tracks across
platters form a **cylinder**.  Our simulated disk only needs to know how
many cylinders it has: valid positions are ``0`` through ``size - 1``.

The geometry is fixed for the lifetime of a run, so it is a frozen
dataclass.  It also owns range checking — every component that accepts
a cylinder number asks the geometry whether it is valid.
"""

from dataclasses import dataclass


class OutOfRangeError(ValueError):
    """Raise when a cylinder number falls outside the disk geometry."""


@dataclass(frozen=True)
class DiskGeometry:
    """Immutable description of a disk's cylinder range ``[0, size)``.

    Attributes:
        size: Number of cylinders on the disk (must be positive).

    """

    size: int

    def __post_init__(self) -> None:
        """Reject disks with no cylinders."""
        if self.size <= 0:
            msg = f"Disk size must be positive, got {self.size}"
            raise ValueError(msg)

    @property
    def first(self) -> int:
        """Return the lowest cylinder (the inner boundary)."""
        return 0

    @property
    def last(self) -> int:
        """Return the highest cylinder (the outer boundary)."""
        return self.size - 1

    def contains(self, cylinder: int) -> bool:
        """Return True if *cylinder* is a valid position on this disk."""
        return self.first <= cylinder <= self.last

    def check(self, cylinder: int, *, what: str = "Cylinder") -> int:
        """Return *cylinder* unchanged, or fail if it is off the disk.

        Raises:
            OutOfRangeError: If *cylinder* is outside ``[0, size - 1]``.

        """
        if not self.contains(cylinder):
            msg = f"{what} {cylinder} is outside the disk range 0..{self.last}"
            raise OutOfRangeError(msg)
        return cylinder
