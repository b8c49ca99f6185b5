"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from philo.parsing import ArgumentError, parse_args
from philo.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation, and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as error:
        sys.stderr.write(error.report)
        sys.stderr.flush()
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())