"""SQLAlchemy models for the project directory."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    location = Column(String(500), nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)
    status = Column(String(20), nullable=False)  # planning/active/on_hold/completed/cancelled
    budget = Column(Numeric(15, 2))
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    members = relationship("ProjectMember", back_populates="project")
    daily_activities = relationship("DailyActivity", back_populates="project")
    documents = relationship("Document", back_populates="project")
    payment_applications = relationship("PaymentApplication", back_populates="project")
    meetings = relationship("Meeting", back_populates="project")
    rabs = relationship("Rab", back_populates="project")


class ProjectMember(Base):
    __tablename__ = "project_members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    role = Column(String(20), nullable=False)  # owner/mk/main_contractor/sub_contractor/designer/qs
    work_package = Column(String(200))
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="members")
    user = relationship("User", back_populates="project_memberships")
    company = relationship("Company", back_populates="project_memberships")

    __table_args__ = (
        Index("idx_project_member_project", "project_id", "role"),
    )

    @property
    def user_name(self):
        return self.user.name if self.user else None

    @property
    def company_name(self):
        return self.company.name if self.company else None
