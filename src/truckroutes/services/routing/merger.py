"""Clarke-Wright route construction.

Every stop starts on its own route. Savings are visited once, largest first,
and two routes are joined when both stops of the pair sit at an end of
different routes and the combined load fits the truck.

Routes are kept in an index-stable arena: a merged-away route leaves a
``None`` tombstone in its slot, and a per-stop locator records the slot and
position of every stop so end/interior checks never scan the routes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ...models.domain import Stop
from .models import Saving, WorkingRoute

logger = logging.getLogger(__name__)


class RouteArena:
    """Working routes addressed by slot, plus a stop -> (slot, position) locator."""

    def __init__(self, stops: Sequence[Stop]) -> None:
        self.stops = list(stops)
        self.members: list[Optional[list[int]]] = [[index] for index in range(len(self.stops))]
        self.loads: list[float] = [stop.demand for stop in self.stops]
        self.locator: list[tuple[int, int]] = [(index, 0) for index in range(len(self.stops))]

    def locate(self, stop_index: int) -> tuple[int, int] | None:
        if not 0 <= stop_index < len(self.locator):
            return None
        return self.locator[stop_index]

    def is_end(self, stop_index: int) -> bool:
        slot, position = self.locator[stop_index]
        members = self.members[slot]
        return position == 0 or position == len(members) - 1

    def merge(self, i: int, j: int) -> None:
        """Join the route ending in ``i`` to the route starting with ``j``.

        Each side is reversed when the matched stop sits at the wrong end.
        The merged route takes over the slot that held ``i``.
        """

        slot_i, pos_i = self.locator[i]
        slot_j, pos_j = self.locator[j]
        left = list(self.members[slot_i])
        right = list(self.members[slot_j])
        if pos_i == 0:
            left.reverse()
        if pos_j != 0:
            right.reverse()

        merged = left + right
        self.members[slot_i] = merged
        self.loads[slot_i] += self.loads[slot_j]
        self.members[slot_j] = None
        for position, stop_index in enumerate(merged):
            self.locator[stop_index] = (slot_i, position)

    def routes(self) -> list[WorkingRoute]:
        return [
            WorkingRoute(stops=[self.stops[index] for index in members], load=self.loads[slot])
            for slot, members in enumerate(self.members)
            if members is not None
        ]


def merge_routes(stops: Sequence[Stop], savings: Iterable[Saving], capacity: float) -> list[WorkingRoute]:
    """Run one greedy merge pass over ``savings`` and return the surviving routes.

    Capacity only gates merges: a stop whose own demand exceeds ``capacity``
    stays on an overloaded single-stop route.
    """

    arena = RouteArena(stops)
    merges = 0
    for saving in savings:
        found_i = arena.locate(saving.i_index)
        found_j = arena.locate(saving.j_index)
        if found_i is None or found_j is None:
            continue
        if found_i[0] == found_j[0]:
            continue
        if not (arena.is_end(saving.i_index) and arena.is_end(saving.j_index)):
            continue
        if arena.loads[found_i[0]] + arena.loads[found_j[0]] > capacity:
            continue
        arena.merge(saving.i_index, saving.j_index)
        merges += 1

    routes = arena.routes()
    logger.debug("Merged %d stops into %d routes with %d merges", len(stops), len(routes), merges)
    return routes
