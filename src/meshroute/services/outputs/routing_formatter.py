"""Serializers for route query results."""

from __future__ import annotations

from decimal import Decimal

from ...config import settings
from ..routing.models import RouteResult


def _format_distance(distance_km: float) -> str:
    distance_km = float(distance_km)
    if distance_km.is_integer():
        return f"{distance_km:.0f}"
    # plain positional digits, never exponent notation
    return format(Decimal(repr(distance_km)), "f")


def route_result_to_json(result: RouteResult, mesh_name: str) -> dict:
    return {
        "mesh": mesh_name,
        "route": list(result.route),
        "distance_km": result.distance_km,
        "autonomy_km_per_l": result.autonomy_km_per_l,
        "fuel_price_per_l": result.fuel_price_per_l,
        "cost": result.cost,
    }


def route_result_to_text(result: RouteResult) -> str:
    places = settings.cost_decimal_places
    return f"{' -> '.join(result.route)} | {_format_distance(result.distance_km)} km | cost {result.cost:.{places}f}"
