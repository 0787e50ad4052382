"""Stop list import/export and demo schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .routing import DepotModel, StopModel


class StopsImportRequest(BaseModel):
    text: str = Field(..., description="CSV text with a header row of id,name,lat,lng,demand columns.")


class StopsImportResponse(BaseModel):
    stops: List[StopModel]
    count: int


class AddStopRequest(BaseModel):
    depot: DepotModel
    stops: List[StopModel] = Field(default_factory=list)
    seed: Optional[int] = None


class DemoPlanResponse(BaseModel):
    depot: DepotModel
    stops: List[StopModel]
    capacity: float
