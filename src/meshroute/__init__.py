"""Cheapest delivery route computation over logistics meshes."""

from .data.mesh_repository import load_mesh
from .errors import InvalidMeshError, InvalidParameterError, MeshRouteError, NoPathError, PointNotFoundError
from .models.domain import Graph, Point, Segment, find_point, outgoing_segments
from .services.mesh.parser import parse_mesh
from .services.routing.models import RouteResult
from .services.routing.service import calculate_cheapest_route

__all__ = [
    "Graph",
    "Point",
    "Segment",
    "RouteResult",
    "find_point",
    "outgoing_segments",
    "parse_mesh",
    "load_mesh",
    "calculate_cheapest_route",
    "MeshRouteError",
    "PointNotFoundError",
    "NoPathError",
    "InvalidParameterError",
    "InvalidMeshError",
]
