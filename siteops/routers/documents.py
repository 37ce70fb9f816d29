"""Document register and approval RPC procedures."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from siteops.database import get_db
from siteops.middleware.auth_middleware import get_actor_id
from siteops.schemas.document import DocumentCreate, DocumentOut, DocumentApprovalCreate, DocumentApprovalOut
from siteops.services import document_service

router = APIRouter(prefix="/rpc", tags=["documents"])


@router.post("/createDocument", response_model=DocumentOut)
def create_document(
    data: DocumentCreate,
    db: Session = Depends(get_db),
    actor_id: int = Depends(get_actor_id),
):
    return document_service.create_document(db, data, actor_id)


@router.get("/getDocuments", response_model=List[DocumentOut])
def get_documents(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return document_service.list_documents(db, project_id)


@router.post("/approveDocument", response_model=DocumentApprovalOut)
def approve_document(
    data: DocumentApprovalCreate,
    db: Session = Depends(get_db),
    actor_id: int = Depends(get_actor_id),
):
    return document_service.approve_document(db, data, actor_id)


@router.get("/getDocumentApprovals", response_model=List[DocumentApprovalOut])
def get_document_approvals(document_id: int = Query(..., alias="documentId"), db: Session = Depends(get_db)):
    return document_service.list_approvals(db, document_id)
