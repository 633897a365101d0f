"""Bounded breadth-first tile search over the grid's 4-way adjacency."""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from township.types import Coord, ParcelPredicate

if TYPE_CHECKING:
    from township.grid import Grid
    from township.parcel import Parcel

logger = logging.getLogger(__name__)


def find_tile(
    grid: Grid,
    start: Coord,
    predicate: ParcelPredicate,
    max_distance: int,
) -> Parcel | None:
    """Return the first parcel in BFS discovery order matching *predicate*.

    Parcels farther than *max_distance* (Manhattan) from *start* are skipped
    without being tested or expanded; the search keeps draining the queue.
    Distance filters, it does not order: the first match in FIFO order wins.
    """
    start_parcel = grid.get(*start)
    if start_parcel is None:
        return None

    frontier: deque[Parcel] = deque([start_parcel])
    visited: set[int] = set()

    while frontier:
        parcel = frontier.popleft()
        if parcel.id in visited:
            continue
        visited.add(parcel.id)

        if start_parcel.distance_to(parcel) > max_distance:
            continue

        frontier.extend(grid.neighbors(parcel.x, parcel.y))

        if predicate(parcel):
            logger.debug("find_tile from %s matched %r after %d visits",
                         start, parcel, len(visited))
            return parcel

    return None
