"""Sidebar: treasury, population, missions, and the active tool."""
from __future__ import annotations

import pygame

from township import City
from ui.constants import (
    BUILDING_COLORS,
    COLOR_DONE,
    COLOR_SIDEBAR_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    SIDEBAR_W,
)

TOOLS = ["residential", "road", "bulldoze", "destroy"]


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    city: City,
    x0: int,
    height: int,
    tool: str,
    paused: bool,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, pygame.Rect(x0, 0, SIDEBAR_W, height))
    x = x0 + 10
    y = 10

    lines = [
        (city.name, COLOR_TEXT),
        (f"Money: {city.money}$", COLOR_TEXT),
        (f"Population: {city.population}", COLOR_TEXT),
        (f"Day: {city.sim_time}", COLOR_TEXT_DIM),
        (f"Level {city.level}  ({city.mission_counter}/3)", COLOR_TEXT),
    ]
    for text, color in lines:
        surface.blit(font.render(text, True, color), (x, y))
        y += 20

    y += 6
    for mission in city.missions:
        mark = "[x]" if mission.done else "[ ]"
        color = COLOR_DONE if mission.done else COLOR_TEXT_DIM
        surface.blit(font.render(f"{mark} {mission.description}", True, color), (x, y))
        y += 18

    y += 16
    surface.blit(font.render("Tools", True, COLOR_TEXT), (x, y))
    y += 22
    for i, name in enumerate(TOOLS):
        if name == tool:
            pygame.draw.rect(surface, (60, 60, 80), pygame.Rect(x - 4, y - 2, SIDEBAR_W - 12, 20))
        swatch = BUILDING_COLORS.get(name, (255, 80, 80))
        pygame.draw.rect(surface, swatch, pygame.Rect(x, y, 14, 14))
        label = name
        quote = city.quote(name)
        if quote is not None:
            label = f"{name} ({quote.cost}$)"
        surface.blit(font.render(f"[{i + 1}] {label}", True, COLOR_TEXT), (x + 20, y - 1))
        y += 22

    y += 12
    controls = [
        "Left: use tool",
        "Right: bulldoze",
        "Space: pause" if not paused else "Space: resume",
        "Esc: quit",
    ]
    for line in controls:
        surface.blit(font.render(line, True, COLOR_TEXT_DIM), (x, y))
        y += 18

    if city.finished:
        y += 12
        surface.blit(font.render("Campaign complete!", True, COLOR_DONE), (x, y))
