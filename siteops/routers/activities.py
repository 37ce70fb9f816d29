"""Daily activity RPC procedures. The recording user comes from the actor token."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from siteops.database import get_db
from siteops.middleware.auth_middleware import get_actor_id
from siteops.schemas.activity import DailyActivityCreate, DailyActivityOut
from siteops.services import activity_service

router = APIRouter(prefix="/rpc", tags=["activities"])


@router.post("/createDailyActivity", response_model=DailyActivityOut)
def create_daily_activity(
    data: DailyActivityCreate,
    db: Session = Depends(get_db),
    actor_id: int = Depends(get_actor_id),
):
    return activity_service.create_daily_activity(db, data, actor_id)


@router.get("/getDailyActivities", response_model=List[DailyActivityOut])
def get_daily_activities(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return activity_service.list_daily_activities(db, project_id)
