"""Per-project dashboard aggregation.

Each metric is an independent query; no snapshot isolation is taken across
them. A project id with no rows (or no project at all) yields zeros.
"""

from datetime import timedelta
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from siteops.config import settings
from siteops.models.activity import DailyActivity
from siteops.models.document import Document
from siteops.models.meeting import Meeting
from siteops.models.payment import PaymentApplication
from siteops.models.project import Project, ProjectMember
from siteops.utils.helpers import round_half_up, to_decimal, utcnow

SETTLED_PAYMENT_STATUSES = ("approved", "paid")


def _count(query) -> int:
    return int(query.scalar() or 0)


def _overall_progress(db: Session, project_id: int) -> int:
    total, count = (
        db.query(
            func.sum(DailyActivity.progress_percentage),
            func.count(DailyActivity.id),
        )
        .filter(DailyActivity.project_id == project_id)
        .one()
    )
    if not count:
        return 0
    return round_half_up(to_decimal(total) / Decimal(count))


def _budget_utilization(db: Session, project_id: int) -> int:
    budget = db.query(Project.budget).filter(Project.id == project_id).scalar()
    if budget is None or to_decimal(budget) == 0:
        return 0
    settled = (
        db.query(func.sum(PaymentApplication.amount))
        .filter(
            PaymentApplication.project_id == project_id,
            PaymentApplication.status.in_(SETTLED_PAYMENT_STATUSES),
        )
        .scalar()
    )
    settled = to_decimal(settled)
    if settled == 0:
        return 0
    return round_half_up(settled / to_decimal(budget) * 100)


def get_project_dashboard(db: Session, project_id: int) -> dict:
    recent_since = utcnow() - timedelta(days=settings.RECENT_ACTIVITY_DAYS)

    activities = db.query(func.count(DailyActivity.id)).filter(DailyActivity.project_id == project_id)

    return {
        "project_id": project_id,
        "total_activities": _count(activities),
        "recent_activities": _count(activities.filter(DailyActivity.date >= recent_since)),
        "pending_approvals": _count(
            db.query(func.count(Document.id)).filter(
                Document.project_id == project_id,
                Document.approval_status == "pending",
            )
        ),
        "active_meetings": _count(
            db.query(func.count(Meeting.id)).filter(
                Meeting.project_id == project_id,
                Meeting.status == "scheduled",
            )
        ),
        "overall_progress": _overall_progress(db, project_id),
        "budget_utilization": _budget_utilization(db, project_id),
        "active_contractors": _count(
            db.query(func.count(ProjectMember.id)).filter(
                ProjectMember.project_id == project_id,
                ProjectMember.role == "main_contractor",
            )
        ),
        # Counts activities carrying safety notes, not verified incident reports.
        "k3_incidents": _count(
            activities.filter(DailyActivity.k3_notes.isnot(None))
        ),
    }
