"""SQLAlchemy models for project meetings and attendees."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class Meeting(Base):
    __tablename__ = "meetings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    scheduled_at = Column(DateTime, nullable=False)
    location = Column(String(500))  # site room or online platform
    status = Column(String(20), nullable=False, default="scheduled")
    # scheduled/ongoing/completed/cancelled
    meeting_notes = Column(Text)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="meetings")
    creator = relationship("User", back_populates="meetings_created")
    attendees = relationship("MeetingAttendee", back_populates="meeting", order_by="MeetingAttendee.id")

    __table_args__ = (
        Index("idx_meeting_project", "project_id", "status"),
    )


class MeetingAttendee(Base):
    __tablename__ = "meeting_attendees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meeting_id = Column(Integer, ForeignKey("meetings.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    attended = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    meeting = relationship("Meeting", back_populates="attendees")
    user = relationship("User", back_populates="meeting_attendances")
