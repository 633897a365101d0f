"""Parcel - a single grid cell holding at most one building."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from township.buildings import Building
    from township.city import City


class Parcel:
    def __init__(self, pid: int, x: int, y: int) -> None:
        self._id = pid
        self._x = x
        self._y = y
        self._building: Building | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def building(self) -> Building | None:
        return self._building

    @property
    def occupied(self) -> bool:
        return self._building is not None

    @property
    def residents(self) -> int:
        if self._building is None or self._building.residents is None:
            return 0
        return self._building.residents.count

    def set_building(self, building: Building | None) -> None:
        self._building = building

    def distance_to(self, other: Parcel) -> int:
        """Manhattan distance between two parcels."""
        return abs(self._x - other.x) + abs(self._y - other.y)

    def simulate(self, city: City) -> None:
        if self._building is not None:
            self._building.simulate(city)

    def refresh_view(self, city: City) -> None:
        city.view.refresh(self, city)

    def __repr__(self) -> str:
        kind = self._building.type.value if self._building is not None else "empty"
        return f"Parcel({self._x}, {self._y}, {kind})"
