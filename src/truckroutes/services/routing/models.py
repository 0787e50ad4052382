"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Stop


@dataclass(frozen=True, slots=True)
class Saving:
    """Distance saved by serving ``i`` and ``j`` on one trip instead of two.

    ``i_index``/``j_index`` are positions in the solved stop list, ``i_index < j_index``.
    """

    i: Stop
    j: Stop
    i_index: int
    j_index: int
    value: float


@dataclass(slots=True)
class WorkingRoute:
    stops: List[Stop] = field(default_factory=list)
    load: float = 0.0


@dataclass(frozen=True, slots=True)
class RouteResult:
    route: tuple[Stop, ...]
    distance_km: float
    load: float

    @property
    def stop_ids(self) -> list[str]:
        return [stop.id for stop in self.route]
