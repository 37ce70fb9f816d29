"""Pydantic request/response contracts for projects and project members."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, Literal
from siteops.schemas.types import DECIMAL_WIRE_NOTE, UtcDatetime

ProjectStatus = Literal["planning", "active", "on_hold", "completed", "cancelled"]
ProjectRole = Literal["owner", "mk", "main_contractor", "sub_contractor", "designer", "qs"]


class ProjectBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    location: str = Field(min_length=1)
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    status: ProjectStatus


class ProjectCreate(ProjectBase):
    budget: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=15, decimal_places=2, description=DECIMAL_WIRE_NOTE
    )


class ProjectOut(ProjectBase):
    id: int
    name: str
    location: str
    budget: Optional[Decimal] = Field(default=None, description=DECIMAL_WIRE_NOTE)
    created_at: UtcDatetime

    model_config = {"from_attributes": True}


class ProjectMemberCreate(BaseModel):
    project_id: int
    user_id: int
    company_id: int
    role: ProjectRole
    work_package: Optional[str] = None


class ProjectMemberOut(ProjectMemberCreate):
    id: int
    user_name: Optional[str] = None
    company_name: Optional[str] = None
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
