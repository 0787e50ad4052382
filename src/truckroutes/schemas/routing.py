"""Routing request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..models.domain import Depot, Stop


class DepotModel(BaseModel):
    name: str = "Factory"
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    def to_domain(self) -> Depot:
        return Depot(name=self.name, lat=self.lat, lng=self.lng)

    @classmethod
    def from_domain(cls, depot: Depot) -> "DepotModel":
        return cls(name=depot.name, lat=depot.lat, lng=depot.lng)


class StopModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    demand: float = Field(default=1, ge=0, allow_inf_nan=False, description="Quantity loaded at pickup.")

    def to_domain(self) -> Stop:
        return Stop(id=self.id, name=self.name, lat=self.lat, lng=self.lng, demand=self.demand)

    @classmethod
    def from_domain(cls, stop: Stop) -> "StopModel":
        return cls(id=stop.id, name=stop.name, lat=stop.lat, lng=stop.lng, demand=stop.demand)


class RoutingRequest(BaseModel):
    depot: DepotModel
    stops: List[StopModel] = Field(default_factory=list)
    capacity: float = Field(..., gt=0, allow_inf_nan=False, description="Truck capacity in demand units.")


class RouteResultModel(BaseModel):
    truck: int = Field(..., description="1-based rank, shortest route first.")
    label: str
    sequence: str = Field(..., description="DEPOT -> <id> -> ... -> DEPOT")
    stops: List[StopModel]
    distance_km: float
    load: float
    over_capacity: bool = Field(
        default=False,
        description="True only for a single stop whose own demand exceeds the capacity.",
    )


class PlanSummaryModel(BaseModel):
    total_stops: int
    total_load: float
    trucks_used: int
    total_distance_km: float


class RoutingResponse(BaseModel):
    routes: List[RouteResultModel]
    summary: PlanSummaryModel
    metadata: dict
