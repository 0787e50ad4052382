"""2-opt refinement of a single route."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Depot, Stop
from ..geospatial import HasLatLng, haversine_km

IMPROVEMENT_TOLERANCE = 1e-9
"""A reversal is kept only when it shortens the route by more than this many km."""

MIN_STOPS_FOR_TWO_OPT = 4


def _node(depot: Depot, sequence: Sequence[Stop], index: int) -> HasLatLng:
    # Positions -1 and len(sequence) are the depot at either end of the trip.
    if index < 0 or index >= len(sequence):
        return depot
    return sequence[index]


def two_opt(depot: Depot, sequence: Sequence[Stop], *, tolerance: float = IMPROVEMENT_TOLERANCE) -> list[Stop]:
    """Reverse sub-sequences until no reversal shortens the depot round trip.

    Every pair ``0 <= i < k < len`` is tried per pass; an improving reversal is
    adopted immediately and later pairs in the same pass see the new order.
    Passes repeat until one makes no change. Routes with fewer than four
    stops are returned as a copy, unchanged.
    """

    best = list(sequence)
    if len(best) < MIN_STOPS_FOR_TWO_OPT:
        return best

    improved = True
    while improved:
        improved = False
        for i in range(len(best) - 1):
            for k in range(i + 1, len(best)):
                before = haversine_km(_node(depot, best, i - 1), _node(depot, best, i)) + haversine_km(
                    _node(depot, best, k), _node(depot, best, k + 1)
                )
                candidate = best[:i] + best[i : k + 1][::-1] + best[k + 1 :]
                after = haversine_km(_node(depot, candidate, i - 1), _node(depot, candidate, i)) + haversine_km(
                    _node(depot, candidate, k), _node(depot, candidate, k + 1)
                )
                if after + tolerance < before:
                    best = candidate
                    improved = True
    return best
