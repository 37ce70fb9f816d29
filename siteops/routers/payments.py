from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from siteops.database import get_db
from siteops.middleware.auth_middleware import get_actor_id
from siteops.schemas.payment import PaymentApplicationCreate, PaymentApplicationOut
from siteops.services import payment_service

router = APIRouter(prefix="/rpc", tags=["payments"])


@router.post("/createPaymentApplication", response_model=PaymentApplicationOut)
def create_payment_application(
    data: PaymentApplicationCreate,
    db: Session = Depends(get_db),
    actor_id: int = Depends(get_actor_id),
):
    return payment_service.create_payment_application(db, data, actor_id)


@router.get("/getPaymentApplications", response_model=List[PaymentApplicationOut])
def get_payment_applications(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return payment_service.list_payment_applications(db, project_id)
