"""Stop list endpoints: CSV import/export and demo data."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from ...config import settings
from ...data.demo import DEMO_DEPOT, DEMO_STOPS, add_stop, random_stops
from ...data.stops_repository import parse_stops_csv
from ...schemas.routing import DepotModel, StopModel
from ...schemas.stops import AddStopRequest, DemoPlanResponse, StopsImportRequest, StopsImportResponse
from ...services.outputs.routing_formatter import stops_to_csv

router = APIRouter(prefix="/stops", tags=["stops"])


@router.post("/import", response_model=StopsImportResponse, status_code=status.HTTP_200_OK)
def import_stops(payload: StopsImportRequest) -> StopsImportResponse:
    stops = parse_stops_csv(payload.text)
    return StopsImportResponse(stops=[StopModel.from_domain(stop) for stop in stops], count=len(stops))


@router.post("/export", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_stops(payload: List[StopModel]) -> PlainTextResponse:
    return PlainTextResponse(
        stops_to_csv([stop.to_domain() for stop in payload]),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="stops.csv"'},
    )


@router.get("/demo", response_model=DemoPlanResponse, status_code=status.HTTP_200_OK)
def demo_plan() -> DemoPlanResponse:
    return DemoPlanResponse(
        depot=DepotModel.from_domain(DEMO_DEPOT),
        stops=[StopModel.from_domain(stop) for stop in DEMO_STOPS],
        capacity=settings.default_capacity,
    )


@router.get("/random", response_model=List[StopModel], status_code=status.HTTP_200_OK)
def randomize_demo(
    count: int = Query(default=settings.demo_stop_count, ge=1, le=26, description="Number of stops to scatter"),
    seed: Optional[int] = Query(default=None, description="Seed for a reproducible layout"),
) -> List[StopModel]:
    return [StopModel.from_domain(stop) for stop in random_stops(DEMO_DEPOT, count, seed=seed)]


@router.post("/add", response_model=List[StopModel], status_code=status.HTTP_200_OK)
def add_demo_stop(payload: AddStopRequest) -> List[StopModel]:
    stops = add_stop(payload.depot.to_domain(), [stop.to_domain() for stop in payload.stops], seed=payload.seed)
    return [StopModel.from_domain(stop) for stop in stops]
