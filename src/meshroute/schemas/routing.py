"""Route query request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RouteRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    origin: str = Field(..., min_length=1, description="Name of the starting point.")
    destination: str = Field(..., min_length=1, description="Name of the delivery point.")
    # positivity is checked by the cost calculator so failures surface as InvalidParameterError
    autonomy_km_per_l: float = Field(..., description="Vehicle autonomy in kilometers per liter.")
    fuel_price_per_l: float = Field(..., description="Fuel price per liter.")


class RouteResponse(BaseModel):
    mesh: str
    route: List[str]
    distance_km: float
    autonomy_km_per_l: float
    fuel_price_per_l: float
    cost: float
