"""Pydantic request/response contracts for documents and approvals."""

from pydantic import BaseModel, Field
from typing import Optional, Literal
from siteops.schemas.types import UtcDatetime

DocumentType = Literal["drawing", "work_method", "material_spec", "permit", "report", "other"]
ApprovalStatus = Literal["pending", "approved", "rejected", "revision_required"]


class DocumentBase(BaseModel):
    project_id: int
    title: str = Field(min_length=1, max_length=200)
    type: DocumentType
    file_url: str = Field(min_length=1)
    version: str = Field(min_length=1, max_length=50)


class DocumentCreate(DocumentBase):
    pass


class DocumentOut(DocumentBase):
    id: int
    title: str
    file_url: str
    version: str
    uploaded_by: int
    approval_status: ApprovalStatus
    created_at: UtcDatetime

    model_config = {"from_attributes": True}


class DocumentApprovalCreate(BaseModel):
    document_id: int
    status: ApprovalStatus
    comments: Optional[str] = None


class DocumentApprovalOut(DocumentApprovalCreate):
    id: int
    approver_id: int
    approved_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
