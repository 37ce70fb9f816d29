import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from siteops.database import Base, get_db, enable_sqlite_foreign_keys
from siteops.main import app
from siteops.models.user import User, Company
from siteops.models.project import Project
from siteops.services.auth_service import create_access_token

TEST_DB_URL = "sqlite:///./test_siteops.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
enable_sqlite_foreign_keys(engine)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "owner": User(email="owner@example.com", name="Owner"),
        "contractor": User(email="contractor@example.com", name="Contractor"),
        "mk": User(email="mk@example.com", name="MK Supervisor"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_company(db):
    company = Company(name="PT Bangun Jaya")
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture
def seed_project(db):
    project = Project(
        name="Gedung Serbaguna",
        location="Bandung",
        start_date=datetime(2026, 1, 5),
        status="active",
        budget=Decimal("100000.00"),
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def auth_headers(user_id: int) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}
