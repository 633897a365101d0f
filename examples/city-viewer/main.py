"""City Viewer - interactive front end for the township simulation core.

Controls:
  1-4         Select tool (residential / road / bulldoze / destroy)
  Left-click  Use tool on parcel
  Right-click Bulldoze parcel
  Space       Pause / Resume
  Escape      Quit
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import pygame

from township import City, CityConfig, NoticeBoard, load_config
from ui.constants import COLOR_BG, FPS, TPS, compute_layout
from ui.renderer import ParcelView, draw_city, draw_hover
from ui.sidebar import TOOLS, draw_sidebar
from ui.status import StatusBar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="City Viewer - township visual demo")
    p.add_argument("--config", type=str, default=None, metavar="FILE",
                   help="TOML file with a [city] table")
    p.add_argument("--size", type=int, default=None, help="Grid width/height (4-40)")
    p.add_argument("--money", type=int, default=None, help="Starting money")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--verbose", action="store_true", help="Log simulation detail")
    return p.parse_args()


def build_config(args: argparse.Namespace) -> CityConfig:
    config = load_config(args.config) if args.config else CityConfig()
    overrides = {}
    if args.size is not None:
        overrides["size"] = max(4, min(40, args.size))
    if args.money is not None:
        overrides["money"] = args.money
    if args.seed is not None:
        overrides["seed"] = args.seed
    if not overrides:
        return config
    return dataclasses.replace(config, **overrides)


def apply_tool(city: City, tool: str, x: int, y: int) -> None:
    if tool == "bulldoze":
        city.bulldoze(x, y)
    elif tool == "destroy":
        city.destroy(x, y)
    else:
        city.place_building(x, y, tool)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = build_config(args)
    layout = compute_layout(config.size)
    tile_size = layout["tile_size"]
    grid_px = layout["grid_px"]

    status = StatusBar()
    notices = NoticeBoard()
    notices.subscribe(status.on_notice)
    view = ParcelView()
    city = City.from_config(config, notifier=notices, view=view)

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption(f"City Viewer - {city.name}")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    tool = TOOLS[0]
    paused = False
    tick_interval = 1.0 / TPS
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        if not paused and not city.finished:
            accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                    status.set("Paused" if paused else "Resumed")
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
                    tool = TOOLS[event.key - pygame.K_1]
                    status.set(f"Tool: {tool}")

            elif event.type == pygame.MOUSEBUTTONDOWN:
                mx, my = event.pos[0] // tile_size, event.pos[1] // tile_size
                if city.get_parcel(mx, my) is not None:
                    if event.button == 1:
                        apply_tool(city, tool, mx, my)
                    elif event.button == 3:
                        city.bulldoze(mx, my)

        # --- Tick simulation at fixed rate ---
        steps = 0
        while accumulator >= tick_interval:
            steps += 1
            accumulator -= tick_interval
        if steps:
            city.simulate(steps)

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_city(screen, city, tile_size)
        view.draw(screen, tile_size)

        mouse_x, mouse_y = pygame.mouse.get_pos()
        mx, my = mouse_x // tile_size, mouse_y // tile_size
        if city.get_parcel(mx, my) is not None:
            color = (255, 80, 80) if tool in ("bulldoze", "destroy") else (255, 255, 0)
            draw_hover(screen, mx, my, tile_size, color)

        draw_sidebar(screen, font, city, grid_px, layout["screen_h"], tool, paused)
        status.draw(screen, grid_px, layout["screen_w"])

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
