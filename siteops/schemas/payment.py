"""Pydantic request/response contracts for payment applications (termin)."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, Literal
from siteops.schemas.types import DECIMAL_WIRE_NOTE, UtcDatetime

PaymentStatus = Literal["draft", "submitted", "under_review", "approved", "rejected", "paid"]


class PaymentApplicationCreate(BaseModel):
    project_id: int
    contractor_id: int
    term_number: int = Field(ge=1)
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    work_progress: Decimal = Field(ge=0, le=100, max_digits=5, decimal_places=2)


class PaymentApplicationOut(BaseModel):
    id: int
    project_id: int
    contractor_id: int
    term_number: int
    amount: Decimal = Field(description=DECIMAL_WIRE_NOTE)
    work_progress: Decimal = Field(description=DECIMAL_WIRE_NOTE)
    status: PaymentStatus
    submitted_by: int
    submitted_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
