"""SQLAlchemy models for users and contracting companies."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    phone = Column(String(30))
    avatar_url = Column(String(500))
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    project_memberships = relationship("ProjectMember", back_populates="user")
    daily_activities = relationship("DailyActivity", back_populates="user")
    documents_uploaded = relationship("Document", back_populates="uploader")
    document_approvals = relationship("DocumentApproval", back_populates="approver")
    payment_applications = relationship("PaymentApplication", back_populates="submitter")
    meetings_created = relationship("Meeting", back_populates="creator")
    meeting_attendances = relationship("MeetingAttendee", back_populates="user")


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(500))
    phone = Column(String(30))
    email = Column(String(255))
    registration_number = Column(String(100))
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project_memberships = relationship("ProjectMember", back_populates="company")
    payment_applications = relationship("PaymentApplication", back_populates="contractor")
    rabs = relationship("Rab", back_populates="contractor")
