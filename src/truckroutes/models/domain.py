"""Domain models for pickup stops and the depot."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stop:
    """A pickup location. Coordinates are degrees; demand is in truck capacity units."""

    id: str
    name: str
    lat: float
    lng: float
    demand: float


@dataclass(frozen=True, slots=True)
class Depot:
    """The single start and end point of every route (the factory)."""

    name: str
    lat: float
    lng: float
