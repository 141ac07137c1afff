"""Run a full simulation from a values file and report the outcome."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from typing import TextIO

from acequia.manager import DEFAULT_VALUES_PATH, AcequiaManager
from acequia.solution import solve_problems


def run(
    path: str | PathLike[str] = DEFAULT_VALUES_PATH, out: TextIO | None = None
) -> AcequiaManager:
    """Set up from ``path``, solve, and write the final state and scores to ``out``."""
    out = sys.stdout if out is None else out
    manager = AcequiaManager()
    manager.initialize_random_parameters(path)
    solve_problems(manager, out)
    out.write(manager.format_state())
    out.write(manager.evaluate_solution())
    out.write(manager.format_leaderboard())
    return manager


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    parser = argparse.ArgumentParser(description="Run the water management simulation.")
    parser.add_argument("path", nargs="?", default=DEFAULT_VALUES_PATH, help="values file")
    args = parser.parse_args(argv)
    try:
        run(args.path)
    except (OSError, ValueError) as error:
        print(f"execution failed! {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())