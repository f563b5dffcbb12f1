"""Route reconstruction from predecessor links."""

from __future__ import annotations

from typing import Mapping, Sequence

from ...errors import NoPathError
from ...models.domain import Graph, find_point, outgoing_segments


def build_route(destination: str, predecessors: Mapping[str, str], origin: str) -> tuple[str, ...]:
    """Walk predecessors back from ``destination`` and return the route origin first."""
    route: list[str] = []
    current: str | None = destination
    while current is not None:
        route.append(current)
        if len(route) > len(predecessors) + 1:
            # a predecessor cycle can only come from a malformed map
            raise NoPathError(origin, destination)
        current = predecessors.get(current)

    if route[-1] != origin:
        raise NoPathError(origin, destination)
    route.reverse()
    return tuple(route)


def route_distance(graph: Graph, route: Sequence[str]) -> float:
    """Sum the lightest segment weight between each pair of consecutive route entries."""
    total = 0.0
    for current, following in zip(route, route[1:]):
        weights = [
            segment.distance_km
            for segment in outgoing_segments(find_point(graph, current))
            if segment.destination == following
        ]
        if not weights:
            raise NoPathError(current, following)
        total += min(weights)
    return total
