"""Regions, water sources and the canals that move water between regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Divisor that turns the gallons moved through a canal into level units.
GALLONS_PER_UNIT = 1000.0
# Fraction of capacity at or below which a region counts as in drought.
DROUGHT_FRACTION = 0.2


class WaterSourceType(Enum):
    """Kind of water source feeding a region."""

    RIVER = "river"
    UNDERGROUND = "underground"
    DAM = "dam"


@dataclass(eq=False)
class WaterSource:
    """A river, aquifer or dam that supplies water to regions."""

    name: str
    type: WaterSourceType
    water_level: float

    def update_water_level(self, change: float) -> None:
        """Add ``change`` (which may be negative) to the water level."""
        self.water_level += change


@dataclass(eq=False)
class Region:
    """A region with a water level, a need and a capacity.

    ``overflow`` and ``drought`` count how often the region reached its
    capacity or fell to drought level.
    """

    name: str
    water_level: float
    water_need: float
    water_capacity: float
    is_flooded: bool = False
    is_in_drought: bool = False
    overflow: int = 0
    drought: int = 0
    supplied_water: list[WaterSource] = field(default_factory=list)

    def update_water_level(self, change: float) -> None:
        """Apply a change in water level and refresh the flood and drought flags."""
        self.water_level += change
        if self.water_level >= self.water_capacity:
            self.water_level = self.water_capacity
            self.is_flooded = True
            self.is_in_drought = False
            self.overflow += 1
        elif self.water_level > self.water_need:
            self.is_flooded = False
            self.is_in_drought = False
        elif self.water_level >= DROUGHT_FRACTION * self.water_capacity:
            self.is_flooded = False
            self.is_in_drought = False
        else:
            self.is_in_drought = True
            self.is_flooded = False
            self.drought += 1

        if self.water_level < 0:
            self.water_level = 0.0
            self.is_in_drought = True
            self.is_flooded = False

    def add_water_source(self, source: WaterSource) -> None:
        """Record that ``source`` supplies this region."""
        self.supplied_water.append(source)


@dataclass(eq=False)
class Canal:
    """A canal carrying water from one region to another while open."""

    name: str
    source_region: Region
    destination_region: Region
    water_source: WaterSource
    flow_rate: float = 0.0
    is_open: bool = False

    def set_flow_rate(self, rate: float) -> None:
        """Set the flow rate in gallons per second."""
        self.flow_rate = rate

    def toggle_open(self, is_open: bool) -> None:
        """Open or close the canal."""
        self.is_open = is_open

    def update_water(self, seconds: int) -> None:
        """Move water for ``seconds`` seconds if the canal is open."""
        if not self.is_open:
            return
        gallons = self.flow_rate * max(seconds, 0)
        amount = gallons / GALLONS_PER_UNIT
        self.source_region.update_water_level(-amount)
        self.destination_region.update_water_level(amount)