"""Cheapest-route query orchestration."""

from __future__ import annotations

import logging

from ...errors import MeshRouteError
from ...models.domain import Graph, find_point
from ...schemas.routing import RouteRequest, RouteResponse
from ..outputs.routing_formatter import route_result_to_json
from .cost import calculate_cost, validate_vehicle_parameters
from .models import RouteResult
from .pathfinder import find_shortest_paths
from .route_builder import build_route

logger = logging.getLogger(__name__)


def _shortest_route(graph: Graph, origin: str, destination: str, strategy: str | None) -> tuple[tuple[str, ...], float]:
    origin_point = find_point(graph, origin)
    destination_point = find_point(graph, destination)
    if origin_point.name == destination_point.name:
        return (origin_point.name,), 0.0

    paths = find_shortest_paths(graph, origin_point, strategy=strategy)
    distance = paths.distance_to(destination_point.name)
    route = build_route(destination_point.name, paths.predecessors, origin_point.name)
    return route, distance


def calculate_cheapest_route(
    graph: Graph,
    origin: str,
    destination: str,
    autonomy_km_per_l: float,
    fuel_price_per_l: float,
    *,
    strategy: str | None = None,
) -> RouteResult:
    """Find the shortest route between two points and price it.

    Vehicle parameters are validated before the mesh is searched. Raises
    ``InvalidParameterError``, ``PointNotFoundError`` or ``NoPathError``.
    """
    try:
        validate_vehicle_parameters(autonomy_km_per_l, fuel_price_per_l)
        route, distance = _shortest_route(graph, origin, destination, strategy)
        cost = calculate_cost(distance, autonomy_km_per_l, fuel_price_per_l)
    except MeshRouteError as exc:
        logger.warning(f"Route query {origin} -> {destination} on mesh '{graph.name}' failed: {exc}")
        raise

    logger.info(
        f"Route {' -> '.join(route)} on mesh '{graph.name}': {distance} km, cost {cost}"
    )
    return RouteResult(
        route=route,
        distance_km=distance,
        autonomy_km_per_l=autonomy_km_per_l,
        fuel_price_per_l=fuel_price_per_l,
        cost=cost,
    )


def calculate_route(payload: RouteRequest, graph: Graph) -> RouteResponse:
    result = calculate_cheapest_route(
        graph,
        payload.origin,
        payload.destination,
        payload.autonomy_km_per_l,
        payload.fuel_price_per_l,
    )
    return RouteResponse(**route_result_to_json(result, mesh_name=graph.name))
