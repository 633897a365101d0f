"""Grid - fixed-size square matrix of parcels with 4-way adjacency."""
from __future__ import annotations

from typing import Iterator

from township.parcel import Parcel

# West, east, north, south. Search tie-breaks depend on this order.
_DIRS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class Grid:
    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._columns: list[list[Parcel]] = []
        next_id = 0
        for x in range(size):
            column: list[Parcel] = []
            for y in range(size):
                column.append(Parcel(next_id, x, y))
                next_id += 1
            self._columns.append(column)

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, x: int | None, y: int | None) -> bool:
        if x is None or y is None:
            return False
        return 0 <= x < self._size and 0 <= y < self._size

    def get(self, x: int | None, y: int | None) -> Parcel | None:
        if not self.in_bounds(x, y):
            return None
        return self._columns[x][y]

    def neighbors(self, x: int, y: int) -> list[Parcel]:
        result: list[Parcel] = []
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._size and 0 <= ny < self._size:
                result.append(self._columns[nx][ny])
        return result

    def total_residents(self) -> int:
        """Sum of resident counts over every parcel, rescanned on each call."""
        total = 0
        for parcel in self:
            total += parcel.residents
        return total

    def __iter__(self) -> Iterator[Parcel]:
        for column in self._columns:
            yield from column

    def __len__(self) -> int:
        return self._size * self._size
