"""SQLAlchemy model package; importing it registers every table on Base.metadata."""

from siteops.models.user import User, Company
from siteops.models.project import Project, ProjectMember
from siteops.models.rab import Rab
from siteops.models.activity import DailyActivity, ActivityPhoto
from siteops.models.document import Document, DocumentApproval
from siteops.models.payment import PaymentApplication
from siteops.models.meeting import Meeting, MeetingAttendee

__all__ = [
    "User", "Company",
    "Project", "ProjectMember",
    "Rab",
    "DailyActivity", "ActivityPhoto",
    "Document", "DocumentApproval",
    "PaymentApplication",
    "Meeting", "MeetingAttendee",
]
