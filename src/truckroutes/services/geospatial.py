"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Protocol, Sequence

from shapely.geometry import MultiPoint

EARTH_RADIUS_KM = 6371.0


class HasLatLng(Protocol):
    lat: float
    lng: float


class LatLng(NamedTuple):
    lat: float
    lng: float


def haversine_km(a: HasLatLng, b: HasLatLng) -> float:
    """Great-circle distance in kilometers between two lat/lng points.

    The inner square root is clamped to 1 so rounding on near-antipodal
    points cannot push ``asin`` out of its domain. Non-finite coordinates
    are not validated and come back as NaN.
    """

    if not all(math.isfinite(value) for value in (a.lat, a.lng, b.lat, b.lng)):
        # math.sin raises on infinities
        return math.nan

    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)

    sin_d_phi = math.sin(d_phi / 2)
    sin_d_lambda = math.sin(d_lambda / 2)
    h = sin_d_phi * sin_d_phi + math.cos(phi1) * math.cos(phi2) * sin_d_lambda * sin_d_lambda
    return 2 * EARTH_RADIUS_KM * math.asin(min(math.sqrt(h), 1.0))


def route_distance_km(depot: HasLatLng, stops: Sequence[HasLatLng]) -> float:
    """Round-trip length depot -> stops in order -> depot."""

    total = 0.0
    previous = depot
    for stop in stops:
        total += haversine_km(previous, stop)
        previous = stop
    if stops:
        total += haversine_km(previous, depot)
    return total


def padded_bounds(points: Iterable[HasLatLng], padding: float = 0.2) -> list[list[float]] | None:
    """Return ``[[south, west], [north, east]]`` around the points, grown by ``padding``.

    The padding is a ratio of the box height/width on each side, the way
    Leaflet's ``LatLngBounds.pad`` behaves.
    """

    coords = [(point.lng, point.lat) for point in points]
    if not coords:
        return None
    min_lng, min_lat, max_lng, max_lat = MultiPoint(coords).bounds
    pad_lat = (max_lat - min_lat) * padding
    pad_lng = (max_lng - min_lng) * padding
    return [
        [min_lat - pad_lat, min_lng - pad_lng],
        [max_lat + pad_lat, max_lng + pad_lng],
    ]
