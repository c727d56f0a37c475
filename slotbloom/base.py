# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
from typing import Protocol

from .filter import DEFAULT_CAPACITIES, CharMapping


class Tool(Protocol):
    def name(self) -> str: ...
    def configure(self, subparsers: argparse._SubParsersAction) -> None: ...
    def run(self, args: argparse.Namespace) -> None: ...


def parse_capacities(value: str) -> list[int]:
    """
    Parse a comma-separated list of slot capacities, e.g. "11,13,17".
    """
    try:
        capacities = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid capacities: {value!r}")
    if not capacities:
        raise argparse.ArgumentTypeError("At least one capacity is required")
    for capacity in capacities:
        if capacity <= 0:
            raise argparse.ArgumentTypeError(
                f"Capacities must be positive, got {capacity}"
            )
    return capacities


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--capacities",
        type=parse_capacities,
        default=list(DEFAULT_CAPACITIES),
        help="Comma-separated slot capacities (default: %(default)s)",
    )
    parser.add_argument(
        "--mapping",
        type=CharMapping,
        choices=list(CharMapping),
        default=CharMapping.ALPHABET,
        help="Character mapping for the rolling hash",
    )
