"""Single-depot CVRP solver: Clarke-Wright savings followed by per-route 2-opt."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Depot, Stop
from ..geospatial import route_distance_km
from .merger import merge_routes
from .models import RouteResult, WorkingRoute
from .savings import compute_savings
from .two_opt import two_opt

logger = logging.getLogger(__name__)


def rank_results(depot: Depot, routes: Sequence[WorkingRoute]) -> list[RouteResult]:
    """Measure each route's round trip and order shortest first."""

    results = [
        RouteResult(
            route=tuple(route.stops),
            distance_km=route_distance_km(depot, route.stops),
            load=route.load,
        )
        for route in routes
    ]
    return sorted(results, key=lambda result: result.distance_km)


def solve_cvrp(depot: Depot, stops: Sequence[Stop], capacity: float) -> tuple[RouteResult, ...]:
    """Partition ``stops`` into capacity-bounded routes from ``depot``.

    The call is pure and deterministic: the same depot, stop order and
    capacity always give the same routes in the same order. Stop order
    only matters for breaking ties between equal savings.
    """

    if not stops:
        return ()

    oversized = [stop.id for stop in stops if stop.demand > capacity]
    if oversized:
        logger.warning(
            "%d stop(s) exceed truck capacity %s on their own and will run overloaded: %s",
            len(oversized),
            capacity,
            ", ".join(oversized),
        )

    savings = compute_savings(depot, stops)
    logger.debug("Computed %d savings for %d stops", len(savings), len(stops))

    working_routes = merge_routes(stops, savings, capacity)
    for route in working_routes:
        route.stops = two_opt(depot, route.stops)

    results = rank_results(depot, working_routes)
    logger.info(
        "Planned %d stops onto %d trucks, %.2f km total",
        len(stops),
        len(results),
        sum(result.distance_km for result in results),
    )
    return tuple(results)
