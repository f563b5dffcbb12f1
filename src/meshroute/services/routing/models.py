"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ...errors import NoPathError


@dataclass(frozen=True, slots=True)
class ShortestPaths:
    """Single-source search output, keyed by point name.

    Only points reachable from ``origin`` appear in ``distances``; every
    reachable point except the origin has an entry in ``predecessors``.
    """

    origin: str
    distances: Mapping[str, float]
    predecessors: Mapping[str, str]

    def is_reachable(self, name: str) -> bool:
        return name in self.distances

    def distance_to(self, name: str) -> float:
        try:
            return self.distances[name]
        except KeyError:
            raise NoPathError(self.origin, name) from None


@dataclass(frozen=True, slots=True)
class RouteResult:
    route: tuple[str, ...]
    distance_km: float
    autonomy_km_per_l: float
    fuel_price_per_l: float
    cost: float

    @property
    def origin(self) -> str:
        return self.route[0]

    @property
    def destination(self) -> str:
        return self.route[-1]
