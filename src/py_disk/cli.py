"""Command-line entry point — compare FCFS, SCAN and C-SCAN.

Usage::

    py-disk [HEAD] [--seed N] [--config PATH] [--verbose]

The CLI is the thin I/O wrapper around the simulator.  Parsing the head
position is deliberately forgiving: a missing or non-integer argument
falls back to the configured default with a warning, while a head that
is off the disk is fatal and nothing is computed.
"""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

from py_disk.config import ConfigError, SimulationConfig, load_config
from py_disk.geometry import OutOfRangeError
from py_disk.logging import Logger, LogLevel
from py_disk.report import format_report
from py_disk.simulation import Simulator

EXIT_OK = 0
EXIT_OUT_OF_RANGE = 1
EXIT_BAD_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``py-disk``."""
    parser = argparse.ArgumentParser(
        prog="py-disk",
        description="Compare total head movement of FCFS, SCAN and C-SCAN.",
    )
    parser.add_argument("head", nargs="?", help="initial head position (cylinder)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random workload")
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    parser.add_argument("--verbose", action="store_true", help="print the run log")
    return parser


def resolve_head(raw: str | None, default: int, logger: Logger) -> tuple[int, str | None]:
    """Turn the raw head argument into a cylinder number.

    Returns:
        The head position and the warning to show the user, if any.

    """
    if raw is None:
        warning = f"No initial head position provided. Using default value of {default}"
    else:
        try:
            return int(raw), None
        except ValueError:
            warning = f"Invalid initial head position. Using default value of {default}"
    logger.log(LogLevel.WARNING, warning, source="cli")
    return default, warning


def main(argv: list[str] | None = None) -> int:
    """Run one comparison and print the report.

    This is the ``py-disk`` console entry point.

    Returns:
        The process exit status.

    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SimulationConfig()
    except ConfigError as e:
        print(e)  # noqa: T201
        return EXIT_BAD_CONFIG
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)

    logger = Logger()
    head, warning = resolve_head(args.head, config.default_head, logger)
    if warning:
        print(warning)  # noqa: T201

    simulator = Simulator(config, logger=logger)
    try:
        result = simulator.run(head)
    except OutOfRangeError as e:
        logger.log(LogLevel.ERROR, str(e), source="cli")
        print(f"Initial head position must be between 0 and {config.disk_size - 1}")  # noqa: T201
        if args.verbose:
            print("\n".join(logger.lines()))  # noqa: T201
        return EXIT_OUT_OF_RANGE

    print("\n".join(format_report(result, preview_count=config.preview_count)))  # noqa: T201
    if args.verbose:
        print("\n".join(logger.lines()))  # noqa: T201
    return EXIT_OK
