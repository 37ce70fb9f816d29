from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class Rab(Base):
    """Contractor's itemized budget estimate (Rencana Anggaran Biaya) for one work package."""

    __tablename__ = "rabs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    contractor_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    work_package = Column(String(200), nullable=False)
    file_url = Column(String(1000), nullable=False)
    total_amount = Column(Numeric(15, 2), nullable=False)
    uploaded_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="rabs")
    contractor = relationship("Company", back_populates="rabs")
    uploader = relationship("User")
