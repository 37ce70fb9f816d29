"""Project dashboard aggregation RPC procedure."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from siteops.database import get_db
from siteops.schemas.dashboard import ProjectDashboardOut
from siteops.services import dashboard_service

router = APIRouter(prefix="/rpc", tags=["dashboard"])


@router.get("/getProjectDashboard", response_model=ProjectDashboardOut)
def get_project_dashboard(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return dashboard_service.get_project_dashboard(db, project_id)
