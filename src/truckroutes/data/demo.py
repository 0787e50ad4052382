"""Demo depot and stops (Chiang Mai area) plus generators for quick experiments."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..config import settings
from ..models.domain import Depot, Stop
from .stops_repository import letter_id

DEMO_DEPOT = Depot(name="Factory", lat=18.7877, lng=98.9931)

DEMO_STOPS: tuple[Stop, ...] = (
    Stop(id="A", name="Raw Spot A", lat=18.807, lng=98.97, demand=2),
    Stop(id="B", name="Raw Spot B", lat=18.76, lng=98.98, demand=3),
    Stop(id="C", name="Raw Spot C", lat=18.73, lng=99.02, demand=1),
    Stop(id="D", name="Raw Spot D", lat=18.82, lng=99.04, demand=4),
    Stop(id="E", name="Raw Spot E", lat=18.80, lng=98.95, demand=2),
)

# Full width of the box, so added stops land within +/-0.1 degrees of the depot.
ADD_STOP_BOX_DEGREES = 0.2


def _jitter(rng: random.Random, spread: float) -> float:
    return (rng.random() - 0.5) * spread


def random_stops(
    depot: Depot,
    count: Optional[int] = None,
    *,
    spread: Optional[float] = None,
    seed: Optional[int] = None,
) -> list[Stop]:
    """Scatter ``count`` stops in a box around the depot with demand 1-4."""
    rng = random.Random(seed)
    count = settings.demo_stop_count if count is None else count
    spread = settings.demo_spread_degrees if spread is None else spread
    stops: list[Stop] = []
    for index in range(count):
        stop_id = letter_id(index)
        stops.append(
            Stop(
                id=stop_id,
                name=f"Raw Spot {stop_id}",
                lat=depot.lat + _jitter(rng, spread),
                lng=depot.lng + _jitter(rng, spread),
                demand=rng.randint(1, 4),
            )
        )
    return stops


def add_stop(depot: Depot, stops: Sequence[Stop], *, seed: Optional[int] = None) -> list[Stop]:
    """Append a demand-1 stop near the depot, labelled with the next letter id."""
    rng = random.Random(seed)
    taken = {stop.id for stop in stops}
    index = len(stops)
    while letter_id(index) in taken:
        index += 1
    stop_id = letter_id(index)
    new_stop = Stop(
        id=stop_id,
        name=f"Raw Spot {stop_id}",
        lat=depot.lat + _jitter(rng, ADD_STOP_BOX_DEGREES),
        lng=depot.lng + _jitter(rng, ADD_STOP_BOX_DEGREES),
        demand=1,
    )
    return [*stops, new_stop]
