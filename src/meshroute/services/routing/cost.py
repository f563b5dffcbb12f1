"""Conversion of route distance and vehicle parameters into a fuel cost."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real

from ...config import settings
from ...errors import InvalidParameterError


def _require_positive(parameter: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(parameter, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(parameter, value)


def validate_vehicle_parameters(autonomy_km_per_l: float, fuel_price_per_l: float) -> None:
    _require_positive("autonomy_km_per_l", autonomy_km_per_l)
    _require_positive("fuel_price_per_l", fuel_price_per_l)


def round_cost(value: float, decimal_places: int | None = None) -> float:
    """Round half-up on the decimal representation, so 0.125 becomes 0.13."""
    places = settings.cost_decimal_places if decimal_places is None else decimal_places
    amount = Decimal(repr(value))
    with localcontext() as context:
        # precision must cover every integer digit plus the requested places
        context.prec = max(context.prec, amount.adjusted() + places + 2)
        return float(amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def calculate_cost(
    distance_km: float,
    autonomy_km_per_l: float,
    fuel_price_per_l: float,
    *,
    decimal_places: int | None = None,
) -> float:
    """Return ``(distance / autonomy) * fuel price`` rounded to the configured places."""
    validate_vehicle_parameters(autonomy_km_per_l, fuel_price_per_l)
    if isinstance(distance_km, bool) or not isinstance(distance_km, Real) or not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidParameterError(
            "distance_km",
            distance_km,
            f"Parameter 'distance_km' must be a finite, non-negative number, got {distance_km!r}.",
        )
    cost = (distance_km / autonomy_km_per_l) * fuel_price_per_l
    if not math.isfinite(cost):
        raise InvalidParameterError(
            "distance_km",
            distance_km,
            f"Cost of {distance_km!r} km at {autonomy_km_per_l!r} km/l and {fuel_price_per_l!r} per liter is out of range.",
        )
    return round_cost(cost, decimal_places)
