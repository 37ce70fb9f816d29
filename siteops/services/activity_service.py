"""Daily activity log service layer."""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session, selectinload

from siteops.models.activity import DailyActivity, ActivityPhoto
from siteops.schemas.activity import DailyActivityCreate
from siteops.services import directory_service
from siteops.services.project_service import get_project_or_404

logger = logging.getLogger(__name__)


def create_daily_activity(db: Session, data: DailyActivityCreate, user_id: int) -> DailyActivity:
    get_project_or_404(db, data.project_id)
    if not directory_service.get_user(db, user_id):
        logger.warning("activity rejected, unknown user: id=%s", user_id)
        raise HTTPException(status_code=404, detail=f"User with id {user_id} not found")

    payload = data.model_dump(exclude={"photo_urls"})
    activity = DailyActivity(**payload, user_id=user_id)
    db.add(activity)
    db.flush()

    # Photos share the activity's transaction.
    for url in data.photo_urls:
        db.add(ActivityPhoto(activity_id=activity.id, photo_url=url, caption=None))
    db.commit()
    db.refresh(activity)
    logger.info(
        "daily activity created: id=%s project=%s photos=%d",
        activity.id, activity.project_id, len(data.photo_urls),
    )
    return activity


def list_daily_activities(db: Session, project_id: int) -> List[DailyActivity]:
    return (
        db.query(DailyActivity)
        .options(selectinload(DailyActivity.photos))
        .filter(DailyActivity.project_id == project_id)
        .order_by(DailyActivity.id)
        .all()
    )
