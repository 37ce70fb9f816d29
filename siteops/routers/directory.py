from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from siteops.database import get_db
from siteops.schemas.user import UserCreate, UserOut, CompanyCreate, CompanyOut
from siteops.services import directory_service

router = APIRouter(prefix="/rpc", tags=["directory"])


@router.post("/createUser", response_model=UserOut)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    return directory_service.create_user(db, data)


@router.get("/getUsers", response_model=List[UserOut])
def get_users(db: Session = Depends(get_db)):
    return directory_service.list_users(db)


@router.post("/createCompany", response_model=CompanyOut)
def create_company(data: CompanyCreate, db: Session = Depends(get_db)):
    return directory_service.create_company(db, data)


@router.get("/getCompanies", response_model=List[CompanyOut])
def get_companies(db: Session = Depends(get_db)):
    return directory_service.list_companies(db)
