"""Shared type aliases and collaborator protocols for township."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from township.buildings import Building, BuildingType
    from township.city import City
    from township.parcel import Parcel

Coord = tuple[int, int]

ParcelPredicate = Callable[["Parcel"], bool]


class ConfigError(ValueError):
    """Raised when a city config file cannot be read or is malformed."""


class BuildingFactory(Protocol):
    def __call__(self, x: int, y: int, building_type: BuildingType) -> Building: ...


class RoadSync(Protocol):
    def update_tile(self, x: int, y: int, building: Building | None) -> None: ...


class Service(Protocol):
    def simulate(self, city: City) -> None: ...


class ViewAdapter(Protocol):
    def refresh(self, parcel: Parcel, city: City) -> None: ...


class Notifier(Protocol):
    finished: bool

    def notify(self, kind: str, message: str) -> None: ...
    def play_sound(self, effect: str) -> None: ...
    def finish(self) -> None: ...


class NullView:
    """View adapter for headless cities."""

    def refresh(self, parcel: Parcel, city: City) -> None:
        pass
