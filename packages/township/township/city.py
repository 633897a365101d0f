"""City - the aggregate that owns the grid and runs the simulation loop."""
from __future__ import annotations

import logging
import os
import random
from typing import Any

from township.buildings import BuildingType, create_building
from township.clock import SimClock
from township.config import CityConfig
from township.economy import BuildingEconomy, Price
from township.grid import Grid
from township.missions import Mission, MissionEngine, MissionOutcome
from township.notify import NoticeBoard
from township.parcel import Parcel
from township.roads import RoadNetwork
from township.search import find_tile
from township.treasury import Treasury
from township.types import (
    BuildingFactory,
    Coord,
    Notifier,
    NullView,
    ParcelPredicate,
    RoadSync,
    Service,
    ViewAdapter,
)

logger = logging.getLogger(__name__)


class City:
    def __init__(
        self,
        size: int,
        money: int,
        name: str = "Township",
        *,
        factory: BuildingFactory | None = None,
        roads: RoadSync | None = None,
        notifier: Notifier | None = None,
        view: ViewAdapter | None = None,
        seed: int | None = None,
        move_in_chance: float = CityConfig.move_in_chance,
    ) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._config = CityConfig(
            size=size, money=money, name=name, seed=seed, move_in_chance=move_in_chance,
        )
        self.name = name
        self._rng = random.Random(seed)

        self._grid = Grid(size)
        self._treasury = Treasury(money)
        self._clock = SimClock()
        self._services: list[Service] = []

        self.roads: RoadSync = roads if roads is not None else RoadNetwork(size)
        self.notifier: Notifier = notifier if notifier is not None else NoticeBoard()
        self.view: ViewAdapter = view if view is not None else NullView()

        self._economy = BuildingEconomy(
            self._grid,
            self._treasury,
            factory if factory is not None else create_building,
            self.roads,
            self.notifier,
            refresh=lambda parcel: parcel.refresh_view(self),
        )
        self._missions = MissionEngine(self._treasury, self.notifier)

        for parcel in self._grid:
            parcel.refresh_view(self)

    @classmethod
    def from_config(cls, config: CityConfig, **collaborators: Any) -> City:
        return cls(
            config.size,
            config.money,
            config.name,
            seed=config.seed,
            move_in_chance=config.move_in_chance,
            **collaborators,
        )

    # -- State --

    @property
    def config(self) -> CityConfig:
        return self._config

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def money(self) -> int:
        return self._treasury.balance

    @property
    def treasury(self) -> Treasury:
        return self._treasury

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def population(self) -> int:
        return self._grid.total_residents()

    @property
    def sim_time(self) -> int:
        return self._clock.sim_time

    @property
    def level(self) -> int:
        return self._missions.level

    @property
    def mission_counter(self) -> int:
        return self._missions.mission_counter

    @property
    def missions(self) -> tuple[Mission, ...]:
        return self._missions.missions

    @property
    def finished(self) -> bool:
        return self._missions.finished

    @property
    def services(self) -> tuple[Service, ...]:
        return tuple(self._services)

    def add_service(self, service: Service) -> None:
        self._services.append(service)

    # -- Grid queries --

    def get_parcel(self, x: int | None, y: int | None) -> Parcel | None:
        return self._grid.get(x, y)

    def neighbors(self, x: int, y: int) -> list[Parcel]:
        return self._grid.neighbors(x, y)

    def find_tile(
        self, start: Coord, predicate: ParcelPredicate, max_distance: int
    ) -> Parcel | None:
        return find_tile(self._grid, start, predicate, max_distance)

    # -- Simulation --

    def simulate(self, steps: int = 1) -> MissionOutcome:
        if steps < 1:
            raise ValueError("steps must be positive")

        building_count = 0
        road_count = 0
        for _ in range(steps):
            for service in self._services:
                service.simulate(self)

            building_count = 0
            road_count = 0
            for parcel in self._grid:
                building = parcel.building
                if building is not None:
                    if building.type == BuildingType.RESIDENTIAL:
                        building_count += 1
                    elif building.type == BuildingType.ROAD:
                        road_count += 1
                parcel.simulate(self)

        outcome = self._missions.evaluate(self.population, building_count, road_count)
        self._clock.advance(steps)
        logger.debug(
            "simulated %d step(s) to t=%d: %d buildings, %d roads, %d missions done",
            steps, self.sim_time, building_count, road_count, self.mission_counter,
        )
        return outcome

    # -- Economy --

    def quote(self, building_type: str) -> Price | None:
        return self._economy.quote(building_type)

    def quote_and_debit(self, building_type: str) -> bool:
        return self._economy.try_debit(building_type)

    def place_building(self, x: int, y: int, building_type: str) -> bool:
        return self._economy.place(x, y, building_type)

    def bulldoze(self, x: int, y: int) -> bool:
        return self._economy.bulldoze(x, y)

    def destroy(self, x: int, y: int) -> bool:
        return self._economy.destroy(x, y)

    def __repr__(self) -> str:
        return (
            f"City({self.name!r}, size={self.size}, money={self.money}, "
            f"level={self.level}, t={self.sim_time})"
        )
