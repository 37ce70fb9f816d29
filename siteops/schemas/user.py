"""Pydantic request/response contracts for users and companies."""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from siteops.schemas.types import UtcDatetime


class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = None
    avatar_url: Optional[str] = None


class UserCreate(UserBase):
    pass


class UserOut(UserBase):
    id: int
    email: str
    created_at: UtcDatetime

    model_config = {"from_attributes": True}


class CompanyBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    registration_number: Optional[str] = None


class CompanyCreate(CompanyBase):
    pass


class CompanyOut(CompanyBase):
    id: int
    email: Optional[str] = None
    created_at: UtcDatetime

    model_config = {"from_attributes": True}
