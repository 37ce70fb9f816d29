"""SQLAlchemy model for contractor payment applications (termin)."""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class PaymentApplication(Base):
    __tablename__ = "payment_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    contractor_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    term_number = Column(Integer, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)  # IDR
    work_progress = Column(Numeric(5, 2), nullable=False)
    status = Column(String(20), nullable=False, default="draft")
    # draft/submitted/under_review/approved/rejected/paid
    submitted_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    submitted_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="payment_applications")
    contractor = relationship("Company", back_populates="payment_applications")
    submitter = relationship("User", back_populates="payment_applications")

    __table_args__ = (
        Index("idx_payment_project", "project_id", "status"),
    )
