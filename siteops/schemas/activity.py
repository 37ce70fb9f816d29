"""Pydantic request/response contracts for daily site activities."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List
from siteops.schemas.types import DECIMAL_WIRE_NOTE, UtcDatetime


class DailyActivityBase(BaseModel):
    project_id: int
    date: UtcDatetime
    work_description: str = Field(min_length=1)
    worker_count: int = Field(ge=0)
    materials_used: Optional[str] = None
    progress_percentage: Decimal = Field(
        ge=0, le=100, max_digits=5, decimal_places=2, description=DECIMAL_WIRE_NOTE
    )
    weather: Optional[str] = None
    k3_notes: Optional[str] = None


class DailyActivityCreate(DailyActivityBase):
    photo_urls: List[str] = Field(default_factory=list)


class ActivityPhotoOut(BaseModel):
    id: int
    activity_id: int
    photo_url: str
    caption: Optional[str] = None
    created_at: UtcDatetime

    model_config = {"from_attributes": True}


class DailyActivityOut(DailyActivityBase):
    id: int
    user_id: int
    work_description: str
    photos: List[ActivityPhotoOut] = Field(default_factory=list)
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
