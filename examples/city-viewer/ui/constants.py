"""Layout, color, and rendering constants."""
from __future__ import annotations

SIDEBAR_W = 240
STATUS_H = 32
FPS = 60
TPS = 2

BUILDING_COLORS: dict[str, tuple[int, int, int]] = {
    "residential": (200, 170, 50),
    "road": (160, 160, 160),
    "commercial": (80, 140, 220),
    "industrial": (180, 90, 60),
}

NOTICE_COLORS: dict[str, tuple[int, int, int]] = {
    "money_take": (255, 200, 100),
    "money_give": (100, 255, 100),
    "error": (255, 80, 80),
    "success": (120, 220, 255),
}

COLOR_BG = (20, 20, 30)
COLOR_GROUND = (70, 120, 60)
COLOR_GRID_LINE = (30, 30, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_TEXT = (220, 220, 220)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_DONE = (100, 220, 100)
COLOR_RESIDENT = (255, 255, 255)


def compute_layout(size: int) -> dict[str, int]:
    """Compute layout dimensions from grid size."""
    tile_size = max(16, min(48, 640 // size))
    grid_px = size * tile_size
    return {
        "tile_size": tile_size,
        "grid_px": grid_px,
        "screen_w": grid_px + SIDEBAR_W,
        "screen_h": grid_px + STATUS_H,
    }
