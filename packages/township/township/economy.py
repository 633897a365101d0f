"""BuildingEconomy - placement and removal rules against the treasury.

Every operation is a silent no-op on a missing or wrongly occupied parcel and
returns whether the grid was mutated. Only a failed purchase is reported to
the player.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from township.buildings import BuildingType
from township.grid import Grid
from township.notify import NoticeKind
from township.parcel import Parcel
from township.treasury import Treasury
from township.types import BuildingFactory, Notifier, RoadSync

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Price:
    """Build cost and demolition refund of one building type."""

    cost: int
    refund: int

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")
        if self.refund < 0:
            raise ValueError(f"refund must be >= 0, got {self.refund}")


PRICES: dict[str, Price] = {
    BuildingType.RESIDENTIAL: Price(cost=500, refund=250),
    BuildingType.ROAD: Price(cost=100, refund=50),
}


class BuildingEconomy:
    def __init__(
        self,
        grid: Grid,
        treasury: Treasury,
        factory: BuildingFactory,
        roads: RoadSync,
        notifier: Notifier,
        refresh: Callable[[Parcel], None],
        prices: dict[str, Price] | None = None,
    ) -> None:
        self._grid = grid
        self._treasury = treasury
        self._factory = factory
        self._roads = roads
        self._notifier = notifier
        self._refresh = refresh
        self._prices = dict(PRICES if prices is None else prices)

    def quote(self, building_type: str) -> Price | None:
        return self._prices.get(building_type)

    def try_debit(self, building_type: str) -> bool:
        price = self.quote(building_type)
        if price is None:
            return False
        return self._treasury.debit(price.cost)

    def place(self, x: int, y: int, building_type: str) -> bool:
        parcel = self._grid.get(x, y)
        if parcel is None or parcel.occupied:
            return False
        price = self.quote(building_type)
        if price is None:
            logger.debug("no placement rule for %r at (%d, %d)", building_type, x, y)
            return False
        if not self.try_debit(building_type):
            self._notifier.notify(NoticeKind.ERROR, "Insufficient funds.")
            return False

        self._notifier.play_sound("building")
        parcel.set_building(self._factory(x, y, BuildingType(building_type)))
        self._refresh_around(parcel)

        building = parcel.building
        if building.type == BuildingType.ROAD:
            self._roads.update_tile(x, y, building)
            self._notifier.notify(NoticeKind.MONEY_TAKE, f"Road built: -{price.cost}$")
        else:
            self._notifier.notify(NoticeKind.MONEY_TAKE, f"Building built: -{price.cost}$")
        logger.debug("placed %s at (%d, %d), balance %d",
                     building.type, x, y, self._treasury.balance)
        return True

    def bulldoze(self, x: int, y: int) -> bool:
        parcel = self._grid.get(x, y)
        if parcel is None or parcel.building is None:
            return False

        building = parcel.building
        if building.type == BuildingType.ROAD:
            refund = self._prices[BuildingType.ROAD].refund
            self._treasury.credit(refund)
            self._roads.update_tile(x, y, None)
            self._notifier.notify(NoticeKind.MONEY_GIVE, f"Road demolished: +{refund}$")
        elif building.type == BuildingType.RESIDENTIAL:
            refund = self._prices[BuildingType.RESIDENTIAL].refund
            self._notifier.notify(NoticeKind.MONEY_GIVE, f"Building demolished: +{refund}$")
            self._treasury.credit(refund)

        self._notifier.play_sound("bulldoze")
        self._clear(parcel)
        logger.debug("bulldozed %s at (%d, %d), balance %d",
                     building.type, x, y, self._treasury.balance)
        return True

    def destroy(self, x: int, y: int) -> bool:
        """Disaster removal: residential buildings only, no refund."""
        parcel = self._grid.get(x, y)
        if parcel is None or parcel.building is None:
            return False
        if parcel.building.type != BuildingType.RESIDENTIAL:
            return False

        self._roads.update_tile(x, y, None)
        self._notifier.notify(NoticeKind.ERROR, "Building exploded!")
        self._notifier.notify(NoticeKind.ERROR, "Residents did not survive!")
        self._notifier.play_sound("explosion")
        self._clear(parcel)
        logger.debug("destroyed residential building at (%d, %d)", x, y)
        return True

    def _clear(self, parcel: Parcel) -> None:
        parcel.building.release()
        parcel.set_building(None)
        self._refresh_around(parcel)

    def _refresh_around(self, parcel: Parcel) -> None:
        self._refresh(parcel)
        for neighbor in self._grid.neighbors(parcel.x, parcel.y):
            self._refresh(neighbor)
