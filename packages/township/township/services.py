"""Service helpers: wrap plain callables as per-tick city services."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from township.city import City


class FunctionService:
    """Adapts ``fn(city)`` to the ``simulate(city)`` service protocol."""

    def __init__(self, fn: Callable[[City], None], name: str | None = None) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "service")

    def simulate(self, city: City) -> None:
        self._fn(city)

    def __repr__(self) -> str:
        return f"FunctionService({self.name!r})"


def make_service(fn: Callable[[City], None], name: str | None = None) -> FunctionService:
    return FunctionService(fn, name)
