"""Parsing helpers for stop lists uploaded as CSV text."""

from __future__ import annotations

import csv
import io
import logging
import math
from typing import Optional, Sequence

from ..models.domain import Stop

logger = logging.getLogger(__name__)

DEFAULT_DEMAND = 1.0


def letter_id(index: int) -> str:
    """Spreadsheet-style ids: 0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(65 + remainder) + label
    return label


def _coerce_float(value: Optional[str]) -> float:
    """Parse a float, returning NaN for blank or unparsable cells."""
    if value is None or not value.strip():
        return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def _cell(parts: Sequence[str], index: int) -> Optional[str]:
    if 0 <= index < len(parts):
        return parts[index]
    return None


def _delimiter_for(header: str) -> str:
    if "\t" in header and "," not in header:
        return "\t"
    return ","


def parse_stops_csv(text: str) -> list[Stop]:
    """Parse stops from CSV text with a header row.

    Column names are matched case-insensitively among ``id, name, lat, lng,
    demand``; ``id``, ``name`` and ``demand`` may be omitted. Without an id
    column, ids become letters by row position; a blank id cell does too.
    Without a name column the name is ``Stop <id>``, or ``Stop <row number>``
    when the id cell was blank. Without a demand column demand is 1, and a
    blank demand cell reads as 0. Rows whose coordinates are not finite
    numbers, or whose demand is missing, negative or not a number, are dropped.
    Quoted fields may span lines.
    """

    header_line = next((line for line in text.splitlines() if line), None)
    if header_line is None:
        return []

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=_delimiter_for(header_line))
    rows = (parts for parts in reader if any(cell for cell in parts))
    header = next(rows, None)
    if header is None:
        return []
    columns = [name.strip().lower() for name in header]

    def index_of(key: str) -> int:
        return columns.index(key) if key in columns else -1

    id_idx = index_of("id")
    name_idx = index_of("name")
    lat_idx = index_of("lat")
    lng_idx = index_of("lng")
    demand_idx = index_of("demand")

    stops: list[Stop] = []
    dropped = 0
    for row_number, parts in enumerate(rows):
        raw_id = _cell(parts, id_idx) if id_idx >= 0 else letter_id(row_number)
        stop_id = raw_id or letter_id(row_number)
        name = _cell(parts, name_idx)
        if name is None:
            name = f"Stop {raw_id or row_number + 1}"
        lat = _coerce_float(_cell(parts, lat_idx))
        lng = _coerce_float(_cell(parts, lng_idx))

        if demand_idx < 0:
            demand = DEFAULT_DEMAND
        else:
            demand_cell = _cell(parts, demand_idx)
            if demand_cell is not None and not demand_cell.strip():
                demand = 0.0
            else:
                demand = _coerce_float(demand_cell)

        if not (math.isfinite(lat) and math.isfinite(lng)):
            dropped += 1
            continue
        if not math.isfinite(demand) or demand < 0:
            dropped += 1
            continue
        stops.append(Stop(id=stop_id, name=name, lat=lat, lng=lng, demand=demand))

    if dropped:
        logger.debug("Dropped %d malformed stop row(s) during import", dropped)
    return stops
