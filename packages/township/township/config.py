"""City configuration and TOML loading."""
from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from township.types import ConfigError


@dataclass(frozen=True)
class CityConfig:
    """Construction parameters of a city.

    Attributes:
        size: Grid width and height in parcels.
        money: Starting treasury balance.
        name: Display name.
        seed: Seed for the city's random generator (None picks one).
        move_in_chance: Per-tick probability that a residential building
            below capacity gains a resident.
    """

    size: int = 16
    money: int = 5000
    name: str = "Township"
    seed: int | None = None
    move_in_chance: float = 0.25

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.money < 0:
            raise ValueError(f"money must be >= 0, got {self.money}")
        if not 0.0 <= self.move_in_chance <= 1.0:
            raise ValueError(
                f"move_in_chance must be within 0..1, got {self.move_in_chance}"
            )


_FIELDS = {f.name for f in dataclasses.fields(CityConfig)}


def config_from_dict(data: dict[str, Any]) -> CityConfig:
    unknown = sorted(set(data) - _FIELDS)
    if unknown:
        raise ConfigError(f"Unknown city config keys: {', '.join(unknown)}")
    try:
        return CityConfig(**data)
    except (TypeError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: str | Path) -> CityConfig:
    """Read the ``[city]`` table of a TOML file. Absent keys take defaults."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed config {path}: {exc}") from exc

    table = data.get("city", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[city] in {path} must be a table")
    return config_from_dict(table)
