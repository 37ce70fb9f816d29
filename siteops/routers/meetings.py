from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from siteops.database import get_db
from siteops.middleware.auth_middleware import get_actor_id
from siteops.schemas.meeting import MeetingCreate, MeetingOut
from siteops.services import meeting_service

router = APIRouter(prefix="/rpc", tags=["meetings"])


@router.post("/createMeeting", response_model=MeetingOut)
def create_meeting(
    data: MeetingCreate,
    db: Session = Depends(get_db),
    actor_id: int = Depends(get_actor_id),
):
    return meeting_service.create_meeting(db, data, actor_id)


@router.get("/getMeetings", response_model=List[MeetingOut])
def get_meetings(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return meeting_service.list_meetings(db, project_id)
