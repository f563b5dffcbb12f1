"""Single-source shortest-path search (Dijkstra) over a mesh graph.

Two minimum-selection strategies are available and yield identical
results:

* ``linear`` scans the unvisited working set on every iteration, O(V^2).
* ``heap`` keeps tentative distances in a binary heap, O((V + E) log V).

Ties between unvisited points with the same tentative distance are broken
by point name, lowest first. A tentative distance is only replaced by a
strictly smaller candidate, so the first predecessor found at the final
distance is kept.
"""

from __future__ import annotations

import heapq
import logging
import math
from types import MappingProxyType
from typing import Callable

from ...config import settings
from ...models.domain import Graph, Point, outgoing_segments
from .models import ShortestPaths

logger = logging.getLogger(__name__)

SearchStrategy = Callable[[Graph, int], tuple[list[float], list[int | None]]]


def _relax(
    graph: Graph,
    current: int,
    distances: list[float],
    predecessors: list[int | None],
) -> list[int]:
    """Relax every segment leaving ``current``; return the indexes that improved."""
    improved: list[int] = []
    base = distances[current]
    for segment in outgoing_segments(graph.points[current]):
        target = graph.index_of(segment.destination)
        candidate = base + segment.distance_km
        if candidate < distances[target]:
            distances[target] = candidate
            predecessors[target] = current
            improved.append(target)
    return improved


def _linear_search(graph: Graph, origin: int) -> tuple[list[float], list[int | None]]:
    distances = [math.inf] * len(graph)
    predecessors: list[int | None] = [None] * len(graph)
    distances[origin] = 0.0
    _relax(graph, origin, distances, predecessors)

    unvisited = set(range(len(graph)))
    unvisited.discard(origin)
    while unvisited:
        current = min(unvisited, key=lambda index: (distances[index], graph.points[index].name))
        _relax(graph, current, distances, predecessors)
        unvisited.discard(current)
    return distances, predecessors


def _heap_search(graph: Graph, origin: int) -> tuple[list[float], list[int | None]]:
    distances = [math.inf] * len(graph)
    predecessors: list[int | None] = [None] * len(graph)
    settled = [False] * len(graph)
    distances[origin] = 0.0

    queue: list[tuple[float, str, int]] = [(0.0, graph.points[origin].name, origin)]
    while queue:
        distance, _, current = heapq.heappop(queue)
        # stale entry, a shorter distance was pushed later
        if settled[current] or distance > distances[current]:
            continue
        settled[current] = True
        for target in _relax(graph, current, distances, predecessors):
            heapq.heappush(queue, (distances[target], graph.points[target].name, target))
    return distances, predecessors


def get_strategy(name: str) -> SearchStrategy:
    match name:
        case "heap":
            return _heap_search
        case "linear":
            return _linear_search
        case _:
            raise ValueError(f"Unknown path finder strategy '{name}'.")


def find_shortest_paths(graph: Graph, origin: Point, *, strategy: str | None = None) -> ShortestPaths:
    """Compute minimum distances and predecessors from ``origin``.

    ``origin`` must already be resolved with ``find_point``. Points that
    cannot be reached are left out of the result entirely.
    """
    search = get_strategy(strategy or settings.pathfinder_strategy)
    distances, predecessors = search(graph, graph.index_of(origin.name))

    reached: dict[str, float] = {}
    links: dict[str, str] = {}
    for index, point in enumerate(graph.points):
        if math.isinf(distances[index]):
            continue
        reached[point.name] = distances[index]
        predecessor = predecessors[index]
        if predecessor is not None:
            links[point.name] = graph.points[predecessor].name

    logger.debug(
        f"Shortest paths from '{origin.name}' in mesh '{graph.name}': "
        f"{len(reached)} of {len(graph)} points reachable"
    )
    return ShortestPaths(
        origin=origin.name,
        distances=MappingProxyType(reached),
        predecessors=MappingProxyType(links),
    )
