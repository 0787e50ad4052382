"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import Depot, Stop
from ...schemas.routing import (
    PlanSummaryModel,
    RouteResultModel,
    RoutingRequest,
    RoutingResponse,
    StopModel,
)
from ..geospatial import padded_bounds
from ..outputs.routing_formatter import plan_to_csv, route_sequence
from .models import RouteResult
from .solver import solve_cvrp

logger = logging.getLogger(__name__)


def _validate_limits(payload: RoutingRequest) -> None:
    if payload.capacity > settings.max_capacity:
        raise ValueError(f"Capacity {payload.capacity} exceeds the maximum of {settings.max_capacity}.")
    if len(payload.stops) > settings.max_stops:
        raise ValueError(f"Too many stops: {len(payload.stops)} (maximum {settings.max_stops}).")


def _unpack(payload: RoutingRequest) -> tuple[Depot, list[Stop]]:
    _validate_limits(payload)
    return payload.depot.to_domain(), [stop.to_domain() for stop in payload.stops]


def _build_route_overlays(depot: Depot, results: Sequence[RouteResult]) -> list[dict]:
    """Straight-line polylines depot -> stops -> depot, one per truck."""
    overlays: list[dict] = []
    for truck, result in enumerate(results, start=1):
        coordinates = [[depot.lat, depot.lng]]
        coordinates.extend([stop.lat, stop.lng] for stop in result.route)
        coordinates.append([depot.lat, depot.lng])
        overlays.append(
            {
                "route_id": f"Truck {truck}",
                "truck": truck,
                "coordinates": coordinates,
                "source": "haversine",
            }
        )
    return overlays


def build_plan_summary(stops: Sequence[Stop], results: Sequence[RouteResult]) -> PlanSummaryModel:
    return PlanSummaryModel(
        total_stops=len(stops),
        total_load=sum(stop.demand for stop in stops),
        trucks_used=len(results),
        total_distance_km=sum(result.distance_km for result in results),
    )


def _to_route_model(truck: int, result: RouteResult, capacity: float) -> RouteResultModel:
    return RouteResultModel(
        truck=truck,
        label=f"Truck {truck}",
        sequence=route_sequence(result),
        stops=[StopModel.from_domain(stop) for stop in result.route],
        distance_km=result.distance_km,
        load=result.load,
        over_capacity=result.load > capacity,
    )


def optimize_routes(payload: RoutingRequest) -> RoutingResponse:
    depot, stops = _unpack(payload)
    logger.info(f"Optimizing {len(stops)} stops from depot '{depot.name}' with capacity {payload.capacity}")
    results = solve_cvrp(depot, stops, payload.capacity)

    metadata: dict = {
        "algorithm": "clarke_wright_savings+2opt",
        "distance_model": "haversine",
        "capacity": payload.capacity,
        "map_overlays": {
            "routes": _build_route_overlays(depot, results),
            "bounds": padded_bounds([depot, *stops], settings.map_bounds_padding),
        },
    }
    overloaded = [result.route[0].id for result in results if result.load > payload.capacity]
    if overloaded:
        metadata["overloaded_stops"] = overloaded

    return RoutingResponse(
        routes=[_to_route_model(truck, result, payload.capacity) for truck, result in enumerate(results, start=1)],
        summary=build_plan_summary(stops, results),
        metadata=metadata,
    )


def export_plan_csv(payload: RoutingRequest) -> str:
    depot, stops = _unpack(payload)
    return plan_to_csv(solve_cvrp(depot, stops, payload.capacity))
