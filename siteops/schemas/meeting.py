"""Pydantic request/response contracts for meetings."""

from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from siteops.schemas.types import UtcDatetime

MeetingStatus = Literal["scheduled", "ongoing", "completed", "cancelled"]


class MeetingBase(BaseModel):
    project_id: int
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    scheduled_at: UtcDatetime
    location: Optional[str] = None


class MeetingCreate(MeetingBase):
    attendee_ids: List[int] = Field(default_factory=list)


class MeetingAttendeeOut(BaseModel):
    id: int
    meeting_id: int
    user_id: int
    attended: bool
    created_at: UtcDatetime

    model_config = {"from_attributes": True}


class MeetingOut(MeetingBase):
    id: int
    title: str
    status: MeetingStatus
    meeting_notes: Optional[str] = None
    created_by: int
    attendees: List[MeetingAttendeeOut] = Field(default_factory=list)
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
