"""RoadNetwork - default road-sync collaborator with A* routing over road tiles."""
from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from township.buildings import BuildingType
from township.types import Coord

if TYPE_CHECKING:
    from township.buildings import Building

_DIRS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class RoadNetwork:
    def __init__(self, size: int) -> None:
        self._size = size
        self._roads: set[Coord] = set()

    @property
    def size(self) -> int:
        return self._size

    @property
    def nodes(self) -> frozenset[Coord]:
        return frozenset(self._roads)

    def update_tile(self, x: int, y: int, building: Building | None) -> None:
        if building is not None and building.type == BuildingType.ROAD:
            self._roads.add((x, y))
        else:
            self._roads.discard((x, y))

    def has_road(self, x: int, y: int) -> bool:
        return (x, y) in self._roads

    def neighbors(self, coord: Coord) -> list[Coord]:
        x, y = coord
        result: list[Coord] = []
        for dx, dy in _DIRS:
            nxt = (x + dx, y + dy)
            if nxt in self._roads:
                result.append(nxt)
        return result

    def route(self, start: Coord, goal: Coord) -> list[Coord] | None:
        """Shortest road path from *start* to *goal*, both ends included."""
        if start not in self._roads or goal not in self._roads:
            return None

        open_set: list[tuple[int, int, Coord]] = [(0, 0, start)]
        came_from: dict[Coord, Coord] = {}
        g_score: dict[Coord, int] = {start: 0}
        closed: set[Coord] = set()
        counter = 1

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current in closed:
                continue
            closed.add(current)
            if current == goal:
                path: list[Coord] = [current]
                while current in came_from:
                    current = came_from[current]
                    path.append(current)
                path.reverse()
                return path

            for neighbor in self.neighbors(current):
                tentative = g_score[current] + 1
                if tentative < g_score.get(neighbor, tentative + 1):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    h = abs(neighbor[0] - goal[0]) + abs(neighbor[1] - goal[1])
                    heapq.heappush(open_set, (tentative + h, counter, neighbor))
                    counter += 1

        return None

    def connected(self, a: Coord, b: Coord) -> bool:
        return self.route(a, b) is not None
