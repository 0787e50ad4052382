"""Serializers for stop lists and route plans."""

from __future__ import annotations

import csv
import io
from typing import Any, Iterable, Sequence

from ...models.domain import Stop
from ..routing.models import RouteResult

STOPS_COLUMNS = (("id", "ID"), ("name", "Name"), ("lat", "Lat"), ("lng", "Lng"), ("demand", "Demand"))
PLAN_COLUMNS = (("truck", "Truck"), ("load", "Load"), ("distance_km", "Distance_km"), ("sequence", "Sequence"))

DEPOT_LABEL = "DEPOT"
SEQUENCE_SEPARATOR = " -> "


def format_number(value: Any) -> str:
    """Render whole floats without a trailing ``.0`` so ``2.0`` exports as ``2``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def route_sequence(result: RouteResult) -> str:
    return SEQUENCE_SEPARATOR.join([DEPOT_LABEL, *result.stop_ids, DEPOT_LABEL])


def rows_to_csv(rows: Iterable[dict], columns: Sequence[tuple[str, str]]) -> str:
    """Header row of column titles, then one fully double-quoted row per record.

    Quotes inside values are doubled; the csv module does that under QUOTE_ALL.
    """
    buffer = io.StringIO()
    buffer.write(",".join(title for _, title in columns) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if row.get(key) is None else format_number(row.get(key)) for key, _ in columns])
    return buffer.getvalue().rstrip("\n")


def stops_to_csv(stops: Sequence[Stop]) -> str:
    return rows_to_csv(
        (
            {"id": stop.id, "name": stop.name, "lat": stop.lat, "lng": stop.lng, "demand": stop.demand}
            for stop in stops
        ),
        STOPS_COLUMNS,
    )


def plan_to_csv(results: Sequence[RouteResult]) -> str:
    """Plan export; ``Truck`` is the 1-based rank of each route."""
    return rows_to_csv(
        (
            {
                "truck": rank,
                "load": result.load,
                "distance_km": f"{result.distance_km:.2f}",
                "sequence": route_sequence(result),
            }
            for rank, result in enumerate(results, start=1)
        ),
        PLAN_COLUMNS,
    )
