"""Document register and approval workflow.

Every review appends a ``DocumentApproval`` row and overwrites the parent
document's ``approval_status`` in the same transaction, so the current status
always matches the latest history entry. No status is terminal: a rejected or
approved document can be reviewed again.
"""

import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from siteops.models.document import Document, DocumentApproval
from siteops.schemas.document import DocumentCreate, DocumentApprovalCreate
from siteops.utils.helpers import utcnow

logger = logging.getLogger(__name__)


def _get_document_or_404(db: Session, document_id: int) -> Document:
    doc = db.query(Document).filter(Document.id == document_id).first()
    if not doc:
        logger.warning("document lookup failed: id=%s", document_id)
        raise HTTPException(status_code=404, detail=f"Document with id {document_id} not found")
    return doc


def create_document(db: Session, data: DocumentCreate, uploaded_by: int) -> Document:
    doc = Document(**data.model_dump(), uploaded_by=uploaded_by, approval_status="pending")
    db.add(doc)
    db.commit()
    db.refresh(doc)
    logger.info("document created: id=%s project=%s type=%s", doc.id, doc.project_id, doc.type)
    return doc


def list_documents(db: Session, project_id: int) -> List[Document]:
    return (
        db.query(Document)
        .filter(Document.project_id == project_id)
        .order_by(Document.id)
        .all()
    )


def approve_document(db: Session, data: DocumentApprovalCreate, approver_id: int) -> DocumentApproval:
    doc = _get_document_or_404(db, data.document_id)
    approval = DocumentApproval(
        document_id=doc.id,
        approver_id=approver_id,
        status=data.status,
        comments=data.comments,
        approved_at=utcnow() if data.status == "approved" else None,
    )
    db.add(approval)
    doc.approval_status = data.status
    db.commit()
    db.refresh(approval)
    logger.info(
        "document reviewed: id=%s status=%s approver=%s",
        doc.id, data.status, approver_id,
    )
    return approval


def list_approvals(db: Session, document_id: int) -> List[DocumentApproval]:
    _get_document_or_404(db, document_id)
    return (
        db.query(DocumentApproval)
        .filter(DocumentApproval.document_id == document_id)
        .order_by(DocumentApproval.id)
        .all()
    )
