"""A strategy for opening and closing canals until every region is balanced."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from acequia.manager import AcequiaManager
from acequia.model import Canal

RELEASE_FLOW_RATE = 1.0


def find_canal(canals: Sequence[Canal], region_name: str) -> int | None:
    """Index of the last canal whose source region is ``region_name``, or None."""
    match = None
    for index, canal in enumerate(canals):
        if canal.source_region.name == region_name:
            match = index
    return match


def release(canals: Sequence[Canal], region_name: str) -> Canal:
    """Open the canal draining ``region_name`` at full flow and return it."""
    index = find_canal(canals, region_name)
    if index is None:
        raise LookupError(f"no canal leaves region {region_name!r}")
    canal = canals[index]
    canal.toggle_open(True)
    canal.set_flow_rate(RELEASE_FLOW_RATE)
    return canal


def close(canals: Sequence[Canal], region_name: str) -> Canal | None:
    """Close the canal draining ``region_name``, if there is one, and return it."""
    index = find_canal(canals, region_name)
    if index is None:
        return None
    canal = canals[index]
    canal.toggle_open(False)
    return canal


def solve_problems(manager: AcequiaManager, out: TextIO | None = None) -> None:
    """Step the simulation, draining flooded regions and sparing dry ones.

    Runs until every region is solved or the time limit is reached, writing
    the state of each region at every hour to ``out``.
    """
    out = sys.stdout if out is None else out
    canals = manager.canals
    regions = manager.regions
    while not manager.is_solved and manager.hour != manager.simulation_max:
        if manager.hour == 0:
            for canal in canals:
                canal.toggle_open(True)
                canal.set_flow_rate(RELEASE_FLOW_RATE)

        for region in regions:
            if region.is_flooded:
                release(canals, region.name)
            elif region.is_in_drought:
                close(canals, region.name)

        out.write(f"Hour{manager.hour}:\n")
        for region in regions:
            out.write(
                f" {region.name}\n"
                f"Flooded: {int(region.is_flooded)}\n"
                f"Drought: {int(region.is_in_drought)}\n"
            )

        manager.next_hour()