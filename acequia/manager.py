"""The simulation manager: set-up from a values file, hourly steps and scoring."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from acequia.model import Canal, Region, WaterSource, WaterSourceType

DEFAULT_VALUES_PATH = "RandomValues.dat"
SECONDS_PER_HOUR = 3600
SOLVED_REGION_POINTS = 10.0
SOLVED_BONUS = 50.0
LEADERBOARD_ENTRY = "StudentSolution"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class RegionSpec:
    """Initial values for one region."""

    name: str
    water_level: float
    water_need: float
    water_capacity: float


@dataclass(frozen=True)
class SimulationValues:
    """The contents of a values file: time limit and region set-up."""

    simulation_max: int
    regions: list[RegionSpec] = field(default_factory=list)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_values(text: str) -> SimulationValues:
    """Parse a values file.

    The first and third lines are headings, the second holds the maximum
    simulation time and each further non-empty line holds
    ``name,level,need,capacity``.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("values file has no simulation time")
    simulation_max = _leading_int(lines[1])
    specs = []
    for line in lines[3:]:
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"region line needs four fields: {line!r}")
        name, level, need, capacity = fields[:4]
        specs.append(
            RegionSpec(
                name,
                float(_leading_int(level)),
                float(_leading_int(need)),
                float(_leading_int(capacity)),
            )
        )
    return SimulationValues(simulation_max, specs)


def load_values(path: str | PathLike[str]) -> SimulationValues:
    """Read and parse a values file."""
    return parse_values(Path(path).read_text())


def _fmt(value: float) -> str:
    return f"{value:g}"


class AcequiaManager:
    """Holds the regions, sources and canals and runs the simulation."""

    def __init__(self) -> None:
        self.regions: list[Region] = []
        self.water_sources: list[WaterSource] = []
        self.canals: list[Canal] = []
        self.leaderboard: dict[str, float] = {}
        self.solved_time = 0
        self.hour = 0
        self.simulation_max = 0
        self.is_solved = False

    def initialize_random_parameters(
        self, path: str | PathLike[str] = DEFAULT_VALUES_PATH
    ) -> None:
        """Set the whole simulation up from the values file at ``path``."""
        self.initialize_regions(load_values(path))
        self.initialize_water_sources()
        self.initialize_canals()
        self.initialize_constraints()
        self.initialize_time()

    def initialize_regions(self, values: SimulationValues) -> None:
        """Create the regions and take the time limit from ``values``."""
        self.simulation_max = values.simulation_max
        self.regions.extend(
            Region(spec.name, spec.water_level, spec.water_need, spec.water_capacity)
            for spec in values.regions
        )

    def _require_regions(self) -> tuple[Region, Region, Region]:
        if len(self.regions) < 3:
            raise ValueError("the simulation needs at least three regions")
        return self.regions[0], self.regions[1], self.regions[2]

    def initialize_water_sources(self) -> None:
        """Create the water sources and connect them to the regions."""
        first, second, third = self._require_regions()
        rio_grande = WaterSource("Rio Grande", WaterSourceType.RIVER, 100.0)
        aquifer = WaterSource("ABQ Underground Aquifer", WaterSourceType.UNDERGROUND, 200.0)
        dam = WaterSource("Elephant Butte Dam", WaterSourceType.DAM, 150.0)
        pecos = WaterSource("Pecos", WaterSourceType.RIVER, 80.0)
        self.water_sources.extend([rio_grande, aquifer, dam, pecos])

        first.add_water_source(rio_grande)
        second.add_water_source(rio_grande)
        first.add_water_source(aquifer)
        second.add_water_source(dam)
        first.add_water_source(pecos)
        third.add_water_source(pecos)

    def initialize_canals(self) -> None:
        """Create the canals between the regions."""
        first, second, third = self._require_regions()
        if len(self.water_sources) < 4:
            raise ValueError("water sources must be set up before canals")
        rio_grande, _, dam, pecos = self.water_sources[:4]
        self.canals.extend(
            [
                Canal("Canal A", first, second, rio_grande),
                Canal("Canal B", second, third, dam),
                Canal("Canal C", first, third, pecos),
                Canal("Canal D", third, first, dam),
            ]
        )

    def initialize_constraints(self) -> None:
        """Set each region's flags from its level and reset its counters."""
        for region in self.regions:
            region.update_water_level(0)
            region.overflow = 0
            region.drought = 0

    def initialize_time(self) -> None:
        """Reset the clock and the solved state."""
        self.hour = 0
        self.solved_time = 0
        self.is_solved = False

    def next_hour(self) -> None:
        """Run every open canal for an hour, then check whether all is solved."""
        for canal in self.canals:
            if canal.is_open:
                canal.update_water(SECONDS_PER_HOUR)
        self.is_solved = self.solved()
        if self.is_solved:
            self.solved_time = self.hour
        self.hour += 1

    def solved(self) -> bool:
        """True when no region is flooded or in drought and each has more than it needs."""
        return all(
            not region.is_flooded
            and not region.is_in_drought
            and region.water_level > region.water_need
            for region in self.regions
        )

    def penalties(self) -> int:
        """Total number of overflows and droughts over all regions."""
        return sum(region.overflow + region.drought for region in self.regions)

    def format_state(self) -> str:
        """Describe the current state of each region."""
        lines = ["Current State: ", "-----------------"]
        lines.extend(
            f"Region: {region.name}, Water Level: {_fmt(region.water_level)}, "
            f"Water Need: {_fmt(region.water_need)}, "
            f"Flooded: {'Yes' if region.is_flooded else 'No'}, "
            f"Drought: {'Yes' if region.is_in_drought else 'No'}"
            for region in self.regions
        )
        lines.append("------------------")
        return "\n".join(lines) + "\n"

    def evaluate_solution(self) -> str:
        """Score the final state, record it on the leaderboard and return a report."""
        score = sum(
            SOLVED_REGION_POINTS
            for region in self.regions
            if not region.is_flooded
            and not region.is_in_drought
            and region.water_level >= region.water_need
        )
        score -= self.penalties()
        if self.is_solved:
            score += SOLVED_BONUS
            report = f"Time solved = {self.solved_time}\n"
        else:
            report = "Not all regions were solved in time.\n"
        self.leaderboard[LEADERBOARD_ENTRY] = score
        return report + "--------------------\n\n"

    def format_leaderboard(self) -> str:
        """Render the leaderboard, entries sorted by name."""
        lines = ["----------------", "Leaderboard: "]
        lines.extend(f"{name}:{_fmt(score)}" for name, score in sorted(self.leaderboard.items()))
        return "\n".join(lines) + "\n"