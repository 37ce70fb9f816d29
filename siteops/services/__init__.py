"""Service layer package."""

from siteops.services import (
    auth_service,
    directory_service,
    project_service,
    activity_service,
    document_service,
    payment_service,
    meeting_service,
    dashboard_service,
)
