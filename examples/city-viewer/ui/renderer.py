"""Grid and building rendering."""
from __future__ import annotations

import time

import pygame

from township import City, Parcel
from ui.constants import (
    BUILDING_COLORS,
    COLOR_GRID_LINE,
    COLOR_GROUND,
    COLOR_RESIDENT,
)


class ParcelView:
    """View adapter that flashes parcels whose occupancy changed."""

    def __init__(self, duration: float = 0.3) -> None:
        self._duration = duration
        self._flashes: dict[tuple[int, int], float] = {}

    def refresh(self, parcel: Parcel, city: City) -> None:
        self._flashes[(parcel.x, parcel.y)] = time.monotonic()

    def draw(self, surface: pygame.Surface, tile_size: int) -> None:
        now = time.monotonic()
        alive: dict[tuple[int, int], float] = {}
        for (x, y), created in self._flashes.items():
            elapsed = now - created
            if elapsed >= self._duration:
                continue
            alive[(x, y)] = created
            a = 1.0 - elapsed / self._duration
            color = (int(255 * a), int(255 * a), int(120 * a))
            rect = pygame.Rect(x * tile_size + 1, y * tile_size + 1, tile_size - 2, tile_size - 2)
            pygame.draw.rect(surface, color, rect, 2)
        self._flashes = alive


def draw_city(surface: pygame.Surface, city: City, tile_size: int) -> None:
    """Draw ground, buildings, and resident pips."""
    for parcel in city.grid:
        rect = pygame.Rect(parcel.x * tile_size, parcel.y * tile_size, tile_size, tile_size)
        pygame.draw.rect(surface, COLOR_GROUND, rect)

        building = parcel.building
        if building is None:
            continue
        color = BUILDING_COLORS.get(building.type.value, (200, 200, 200))
        if building.type == "road":
            _draw_road(surface, city, parcel, tile_size, color)
        else:
            pygame.draw.rect(surface, color, rect.inflate(-6, -6))
            _draw_residents(surface, parcel, rect)

    grid_px = city.size * tile_size
    for i in range(city.size + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (i * tile_size, 0), (i * tile_size, grid_px))
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, i * tile_size), (grid_px, i * tile_size))


def _draw_road(
    surface: pygame.Surface,
    city: City,
    parcel: Parcel,
    tile_size: int,
    color: tuple[int, int, int],
) -> None:
    # Road segments join toward neighboring roads.
    cx = parcel.x * tile_size + tile_size // 2
    cy = parcel.y * tile_size + tile_size // 2
    width = max(4, tile_size // 3)
    pygame.draw.circle(surface, color, (cx, cy), width // 2)
    for neighbor in city.neighbors(parcel.x, parcel.y):
        if neighbor.building is None or neighbor.building.type != "road":
            continue
        nx = neighbor.x * tile_size + tile_size // 2
        ny = neighbor.y * tile_size + tile_size // 2
        mid = ((cx + nx) // 2, (cy + ny) // 2)
        pygame.draw.line(surface, color, (cx, cy), mid, width)


def _draw_residents(surface: pygame.Surface, parcel: Parcel, rect: pygame.Rect) -> None:
    for i in range(parcel.residents):
        pip = pygame.Rect(rect.x + 5 + i * 6, rect.bottom - 9, 4, 4)
        pygame.draw.rect(surface, COLOR_RESIDENT, pip)


def draw_hover(
    surface: pygame.Surface,
    mx: int,
    my: int,
    tile_size: int,
    color: tuple[int, int, int],
) -> None:
    rect = pygame.Rect(mx * tile_size, my * tile_size, tile_size, tile_size)
    pygame.draw.rect(surface, color, rect, 2)
