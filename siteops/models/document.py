"""SQLAlchemy models for project documents and their approval history."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from siteops.database import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    title = Column(String(200), nullable=False)
    type = Column(String(30), nullable=False)
    # drawing/work_method/material_spec/permit/report/other
    file_url = Column(String(1000), nullable=False)
    version = Column(String(50), nullable=False)
    uploaded_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    approval_status = Column(String(20), nullable=False, default="pending")
    # pending/approved/rejected/revision_required
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="documents")
    uploader = relationship("User", back_populates="documents_uploaded")
    approvals = relationship("DocumentApproval", back_populates="document", order_by="DocumentApproval.id")

    __table_args__ = (
        Index("idx_document_project", "project_id", "approval_status"),
    )


class DocumentApproval(Base):
    __tablename__ = "document_approvals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(Integer, ForeignKey("documents.id"), nullable=False)
    approver_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(String(20), nullable=False)
    comments = Column(Text)
    approved_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    document = relationship("Document", back_populates="approvals")
    approver = relationship("User", back_populates="document_approvals")
