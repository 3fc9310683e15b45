"""Simulation configuration — disk size, workload length, defaults.

The defaults describe the classic experiment: a 5000-cylinder disk,
1000 random requests, and the head parked in the middle at 2500.
A JSON file can override any of them::

    {"disk_size": 200, "request_count": 8, "default_head": 53, "seed": 7}
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from py_disk.geometry import DiskGeometry

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(RuntimeError):
    """Raise when a configuration file cannot be loaded or is invalid."""


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for one simulation run.

    Attributes:
        disk_size: Number of cylinders on the simulated disk.
        request_count: Number of requests in the generated workload.
        default_head: Head position used when none is given.
        preview_count: Requests shown from each end of the workload.
        seed: Random seed for the workload, or None for a fresh one.

    """

    disk_size: int = 5000
    request_count: int = 1000
    default_head: int = 2500
    preview_count: int = 10
    seed: int | None = None

    @property
    def geometry(self) -> DiskGeometry:
        """Return the disk geometry described by this config."""
        return DiskGeometry(self.disk_size)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a plain dict."""
        return dataclasses.asdict(self)


def _validate(config: SimulationConfig) -> SimulationConfig:
    """Check cross-field constraints and return *config*."""
    for name in ("disk_size", "request_count", "preview_count"):
        value = getattr(config, name)
        if value <= 0:
            msg = f"{name} must be positive, got {value}"
            raise ConfigError(msg)
    if not config.geometry.contains(config.default_head):
        msg = f"default_head must be between 0 and {config.disk_size - 1}"
        raise ConfigError(msg)
    return config


def load_config(path: Path) -> SimulationConfig:
    """Load a configuration from a JSON file, falling back to defaults.

    Raises:
        ConfigError: If the file is unreadable, not a JSON object,
            names an unknown setting, or holds a non-integer value.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config: {e}"
        raise ConfigError(msg) from e

    if not isinstance(data, dict):
        msg = "Config file must contain a JSON object"
        raise ConfigError(msg)

    known = {f.name for f in dataclasses.fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        msg = f"Unknown config keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    for key, value in data.items():
        if value is None and key == "seed":
            continue
        # bool is an int subclass but never a valid setting
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"{key} must be an integer, got {value!r}"
            raise ConfigError(msg)

    return _validate(SimulationConfig(**data))
