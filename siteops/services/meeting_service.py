"""Meeting scheduler service layer."""

import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from siteops.models.meeting import Meeting, MeetingAttendee
from siteops.schemas.meeting import MeetingCreate

logger = logging.getLogger(__name__)


def create_meeting(db: Session, data: MeetingCreate, created_by: int) -> Meeting:
    meeting = Meeting(
        **data.model_dump(exclude={"attendee_ids"}),
        status="scheduled",
        meeting_notes=None,
        created_by=created_by,
    )
    db.add(meeting)
    db.flush()
    for user_id in data.attendee_ids:
        db.add(MeetingAttendee(meeting_id=meeting.id, user_id=user_id, attended=False))
    db.commit()
    db.refresh(meeting)
    logger.info(
        "meeting created: id=%s project=%s attendees=%d",
        meeting.id, meeting.project_id, len(data.attendee_ids),
    )
    return meeting


def list_meetings(db: Session, project_id: int) -> List[Meeting]:
    return (
        db.query(Meeting)
        .options(selectinload(Meeting.attendees))
        .filter(Meeting.project_id == project_id)
        .order_by(Meeting.scheduled_at, Meeting.id)
        .all()
    )
