"""Users and companies referenced by every other record."""

import logging
from typing import List

from sqlalchemy.orm import Session

from siteops.models.user import User, Company
from siteops.schemas.user import UserCreate, CompanyCreate

logger = logging.getLogger(__name__)


def create_user(db: Session, data: UserCreate) -> User:
    user = User(**data.model_dump())
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user created: id=%s", user.id)
    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def create_company(db: Session, data: CompanyCreate) -> Company:
    company = Company(**data.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("company created: id=%s name=%r", company.id, company.name)
    return company


def list_companies(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.id).all()
