"""Mission definitions per level and the engine that evaluates them each tick."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum, StrEnum

from township.notify import NoticeKind
from township.treasury import Treasury
from township.types import Notifier

logger = logging.getLogger(__name__)

LEVEL_UP_BONUS = 2500


class MissionKind(StrEnum):
    POPULATION = "population"
    BUILDINGS = "buildings"
    ROADS = "roads"


class MissionOutcome(Enum):
    NONE = "none"
    LEVEL_UP = "level_up"
    CAMPAIGN_COMPLETE = "campaign_complete"


@dataclass
class Mission:
    """One progression objective with a single threshold.

    Attributes:
        description: Player-facing text.
        kind: Which tick metric the threshold applies to.
        target: Minimum value of that metric.
        done: Set once the threshold is met; never cleared within a level.
    """

    description: str
    kind: MissionKind
    target: int
    done: bool = False

    def __post_init__(self) -> None:
        if self.target < 0:
            raise ValueError(f"target must be >= 0, got {self.target}")

    def satisfied_by(self, population: int, building_count: int, road_count: int) -> bool:
        if self.kind is MissionKind.POPULATION:
            return population >= self.target
        if self.kind is MissionKind.BUILDINGS:
            return building_count >= self.target
        return road_count >= self.target


LEVELS: dict[int, tuple[Mission, ...]] = {
    1: (
        Mission("Reach 35 residents", MissionKind.POPULATION, 35),
        Mission("Build 5 residential buildings", MissionKind.BUILDINGS, 5),
        Mission("Have at least 1 road", MissionKind.ROADS, 1),
    ),
    2: (
        Mission("Reach 75 residents", MissionKind.POPULATION, 75),
        Mission("Build 10 residential buildings", MissionKind.BUILDINGS, 10),
        Mission("Have at least 5 roads", MissionKind.ROADS, 5),
    ),
}

FINAL_LEVEL = max(LEVELS)


def level_missions(level: int) -> tuple[Mission, ...]:
    """Fresh, undone copies of the missions for *level*."""
    if level not in LEVELS:
        raise KeyError(f"No missions defined for level {level}")
    return tuple(dataclasses.replace(m, done=False) for m in LEVELS[level])


class MissionEngine:
    def __init__(self, treasury: Treasury, notifier: Notifier, level: int = 1) -> None:
        self._treasury = treasury
        self._notifier = notifier
        self._level = level
        self._missions = level_missions(level)
        self._mission_counter = 0
        self._finished = False

    @property
    def level(self) -> int:
        return self._level

    @property
    def missions(self) -> tuple[Mission, ...]:
        return self._missions

    @property
    def mission_counter(self) -> int:
        return self._mission_counter

    @property
    def finished(self) -> bool:
        return self._finished

    def evaluate(self, population: int, building_count: int, road_count: int) -> MissionOutcome:
        self._mission_counter = 0
        completed = 0
        for mission in self._missions:
            if mission.satisfied_by(population, building_count, road_count):
                mission.done = True
            if mission.done:
                self._mission_counter += 1
                completed += 1

        if completed != len(self._missions):
            return MissionOutcome.NONE

        if self._level < FINAL_LEVEL:
            self._level += 1
            self._missions = level_missions(self._level)
            self._treasury.credit(LEVEL_UP_BONUS)
            self._notifier.notify(NoticeKind.MONEY_GIVE, f"Level up! +{LEVEL_UP_BONUS}$")
            logger.info("advanced to level %d", self._level)
            return MissionOutcome.LEVEL_UP

        if not self._finished:
            self._finished = True
            self._notifier.notify(NoticeKind.SUCCESS, "All missions complete!")
            self._notifier.finish()
            logger.info("campaign complete")
        return MissionOutcome.CAMPAIGN_COMPLETE
