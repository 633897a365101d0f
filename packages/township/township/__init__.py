"""township - Simulation core for a grid-based city builder."""
from __future__ import annotations

from township.buildings import Building, BuildingType, Residents, create_building
from township.city import City
from township.clock import SimClock
from township.config import CityConfig, load_config
from township.economy import PRICES, BuildingEconomy, Price
from township.grid import Grid
from township.missions import (
    LEVELS,
    Mission,
    MissionEngine,
    MissionKind,
    MissionOutcome,
)
from township.notify import Notice, NoticeBoard, NoticeKind
from township.parcel import Parcel
from township.roads import RoadNetwork
from township.search import find_tile
from township.services import FunctionService, make_service
from township.treasury import Treasury
from township.types import ConfigError, Coord, NullView

__all__ = [
    "Building",
    "BuildingEconomy",
    "BuildingType",
    "City",
    "CityConfig",
    "ConfigError",
    "Coord",
    "FunctionService",
    "Grid",
    "LEVELS",
    "Mission",
    "MissionEngine",
    "MissionKind",
    "MissionOutcome",
    "Notice",
    "NoticeBoard",
    "NoticeKind",
    "NullView",
    "PRICES",
    "Parcel",
    "Price",
    "Residents",
    "RoadNetwork",
    "SimClock",
    "Treasury",
    "create_building",
    "find_tile",
    "load_config",
    "make_service",
]
