"""SQLAlchemy models for the daily site activity log."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class DailyActivity(Base):
    __tablename__ = "daily_activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    date = Column(DateTime, nullable=False)
    work_description = Column(Text, nullable=False)
    worker_count = Column(Integer, nullable=False)
    materials_used = Column(Text)
    progress_percentage = Column(Numeric(5, 2), nullable=False)
    weather = Column(String(100))
    k3_notes = Column(Text)  # safety (K3) notes
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="daily_activities")
    user = relationship("User", back_populates="daily_activities")
    photos = relationship("ActivityPhoto", back_populates="activity", order_by="ActivityPhoto.id")

    __table_args__ = (
        Index("idx_activity_project_date", "project_id", "date"),
    )


class ActivityPhoto(Base):
    __tablename__ = "activity_photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    activity_id = Column(Integer, ForeignKey("daily_activities.id"), nullable=False)
    photo_url = Column(String(1000), nullable=False)
    caption = Column(Text)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    activity = relationship("DailyActivity", back_populates="photos")
