"""Payment application (termin) service layer."""

import logging
from typing import List

from sqlalchemy.orm import Session

from siteops.models.payment import PaymentApplication
from siteops.schemas.payment import PaymentApplicationCreate

logger = logging.getLogger(__name__)


def create_payment_application(
    db: Session, data: PaymentApplicationCreate, submitted_by: int
) -> PaymentApplication:
    # term_number is caller-sequenced; duplicates per contractor are not rejected.
    application = PaymentApplication(
        **data.model_dump(),
        status="draft",
        submitted_by=submitted_by,
        submitted_at=None,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    logger.info(
        "payment application created: id=%s project=%s contractor=%s term=%s",
        application.id, application.project_id, application.contractor_id, application.term_number,
    )
    return application


def list_payment_applications(db: Session, project_id: int) -> List[PaymentApplication]:
    return (
        db.query(PaymentApplication)
        .filter(PaymentApplication.project_id == project_id)
        .order_by(PaymentApplication.id)
        .all()
    )
