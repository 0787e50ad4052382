"""Clarke-Wright savings list."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Depot, Stop
from ..geospatial import haversine_km
from .models import Saving


def depot_distances(depot: Depot, stops: Sequence[Stop]) -> list[float]:
    return [haversine_km(depot, stop) for stop in stops]


def pairwise_distances(stops: Sequence[Stop]) -> list[list[float]]:
    """Symmetric stop-to-stop distance matrix with a zero diagonal."""

    n = len(stops)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j] = matrix[j][i] = haversine_km(stops[i], stops[j])
    return matrix


def compute_savings(depot: Depot, stops: Sequence[Stop]) -> list[Saving]:
    """Return ``s(i, j) = d0[i] + d0[j] - d[i][j]`` for every pair, largest first.

    Pairs are generated with ``i`` outer and ``j > i`` inner in input order.
    The sort is stable, so equal savings keep that generation order and two
    solves of the same input merge in the same sequence.
    """

    d0 = depot_distances(depot, stops)
    dij = pairwise_distances(stops)
    savings: list[Saving] = []
    for i in range(len(stops)):
        for j in range(i + 1, len(stops)):
            savings.append(
                Saving(
                    i=stops[i],
                    j=stops[j],
                    i_index=i,
                    j_index=j,
                    value=d0[i] + d0[j] - dij[i][j],
                )
            )
    return sorted(savings, key=lambda saving: -saving.value)
