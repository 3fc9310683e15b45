"""Tests for the disk geometry value type."""

import dataclasses

import pytest

from py_disk.geometry import DiskGeometry, OutOfRangeError

_SIZE = 5000


class TestDiskGeometry:
    """Verify cylinder range and range checking."""

    def test_boundaries(self) -> None:
        """Valid cylinders run from 0 to size - 1."""
        geometry = DiskGeometry(_SIZE)
        assert geometry.first == 0
        assert geometry.last == _SIZE - 1

    def test_contains(self) -> None:
        """Only cylinders inside the range are contained."""
        geometry = DiskGeometry(_SIZE)
        assert geometry.contains(0)
        assert geometry.contains(_SIZE - 1)
        assert not geometry.contains(-1)
        assert not geometry.contains(_SIZE)

    def test_check_returns_value(self) -> None:
        """A valid cylinder passes through unchanged."""
        assert DiskGeometry(_SIZE).check(42) == 42  # noqa: PLR2004

    def test_check_rejects_out_of_range(self) -> None:
        """An invalid cylinder raises OutOfRangeError naming what it was."""
        with pytest.raises(OutOfRangeError, match="Head position 5000"):
            DiskGeometry(_SIZE).check(_SIZE, what="Head position")

    def test_out_of_range_is_value_error(self) -> None:
        """Callers catching ValueError also catch range violations."""
        assert issubclass(OutOfRangeError, ValueError)

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_size(self, size: int) -> None:
        """A disk needs at least one cylinder."""
        with pytest.raises(ValueError, match="positive"):
            DiskGeometry(size)

    def test_is_frozen(self) -> None:
        """The geometry cannot change during a run."""
        geometry = DiskGeometry(_SIZE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            geometry.size = 10  # pyright: ignore[reportAttributeAccessIssue]
