"""Seed the database with a demo construction project."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta
from decimal import Decimal
from siteops.database import SessionLocal, engine, Base
import siteops.models  # noqa: F401

from siteops.models.user import User, Company
from siteops.models.project import Project, ProjectMember
from siteops.models.activity import DailyActivity, ActivityPhoto
from siteops.models.document import Document
from siteops.models.payment import PaymentApplication
from siteops.models.meeting import Meeting, MeetingAttendee
from siteops.services.auth_service import create_access_token
from siteops.utils.helpers import utcnow


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        users = [
            User(email="owner@pemkot.go.id", name="Budi Santoso", phone="+62811000001"),
            User(email="mk@konsultan.co.id", name="Siti Rahmawati", phone="+62811000002"),
            User(email="pm@kontraktor.co.id", name="Agus Wijaya", phone="+62811000003"),
            User(email="qs@konsultan.co.id", name="Dewi Lestari"),
        ]
        db.add_all(users)
        db.flush()

        companies = [
            Company(name="Dinas PUPR Kota", address="Jl. Merdeka No. 1"),
            Company(name="PT Konsultan Manajemen", registration_number="NIB-0001"),
            Company(name="PT Bangun Jaya Konstruksi", registration_number="NIB-0002"),
        ]
        db.add_all(companies)
        db.flush()

        project = Project(
            name="Gedung Pelayanan Terpadu",
            description="Pembangunan gedung 4 lantai",
            location="Bandung, Jawa Barat",
            start_date=datetime(2026, 3, 1),
            end_date=datetime(2027, 2, 28),
            status="active",
            budget=Decimal("12500000000.00"),
        )
        db.add(project)
        db.flush()

        db.add_all([
            ProjectMember(project_id=project.id, user_id=users[0].id, company_id=companies[0].id, role="owner"),
            ProjectMember(project_id=project.id, user_id=users[1].id, company_id=companies[1].id, role="mk"),
            ProjectMember(
                project_id=project.id, user_id=users[2].id, company_id=companies[2].id,
                role="main_contractor", work_package="Struktur",
            ),
            ProjectMember(project_id=project.id, user_id=users[3].id, company_id=companies[1].id, role="qs"),
        ])

        today = utcnow().replace(hour=8, minute=0, second=0, microsecond=0)
        for offset, progress in ((3, "12.50"), (1, "14.00")):
            activity = DailyActivity(
                project_id=project.id,
                user_id=users[2].id,
                date=today - timedelta(days=offset),
                work_description="Pengecoran kolom lantai 1",
                worker_count=24,
                materials_used="Beton K-300 18 m3",
                progress_percentage=Decimal(progress),
                weather="Cerah",
                k3_notes="Seluruh pekerja memakai APD" if offset == 1 else None,
            )
            db.add(activity)
            db.flush()
            db.add(ActivityPhoto(activity_id=activity.id, photo_url=f"https://files.example.com/site/{activity.id}.jpg"))

        db.add(Document(
            project_id=project.id,
            title="Shop drawing kolom K1",
            type="drawing",
            file_url="https://files.example.com/docs/sd-k1.pdf",
            version="1.0",
            uploaded_by=users[2].id,
        ))
        db.add(PaymentApplication(
            project_id=project.id,
            contractor_id=companies[2].id,
            term_number=1,
            amount=Decimal("1250000000.00"),
            work_progress=Decimal("10.00"),
            status="approved",
            submitted_by=users[2].id,
        ))
        meeting = Meeting(
            project_id=project.id,
            title="Rapat koordinasi mingguan",
            scheduled_at=today + timedelta(days=2),
            location="Direksi keet",
            created_by=users[1].id,
        )
        db.add(meeting)
        db.flush()
        db.add_all([MeetingAttendee(meeting_id=meeting.id, user_id=u.id) for u in users])

        db.commit()
        print("Seed data created.")
        for u in users:
            print(f"  {u.email}: Bearer {create_access_token(u.id)}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
