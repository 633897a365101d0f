"""Building types, the default building factory, and resident growth."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from township.city import City


class BuildingType(StrEnum):
    RESIDENTIAL = "residential"
    ROAD = "road"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


DEFAULT_CAPACITY = 4


@dataclass
class Residents:
    """Occupancy of a residential building.

    Attributes:
        count: Residents currently living in the building.
        capacity: Maximum residents the building can hold.
    """

    count: int = 0
    capacity: int = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")
        if not 0 <= self.count <= self.capacity:
            raise ValueError(
                f"count must be within 0..{self.capacity}, got {self.count}"
            )

    @property
    def full(self) -> bool:
        return self.count >= self.capacity


@dataclass
class Building:
    """A structure standing on one parcel.

    ``residents`` is set for residential buildings only. ``release()``
    must be called before the building is dropped from its parcel.
    """

    type: BuildingType
    x: int
    y: int
    residents: Residents | None = None
    released: bool = field(default=False, compare=False)

    def release(self) -> None:
        if self.residents is not None:
            self.residents.count = 0
        self.released = True

    def simulate(self, city: City) -> None:
        residents = self.residents
        if residents is None or residents.full:
            return
        if city.random.random() < city.config.move_in_chance:
            residents.count += 1


def create_building(x: int, y: int, building_type: BuildingType) -> Building:
    """Default building factory."""
    building_type = BuildingType(building_type)
    residents = Residents() if building_type is BuildingType.RESIDENTIAL else None
    return Building(type=building_type, x=x, y=y, residents=residents)
