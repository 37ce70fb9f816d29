from pydantic import BaseModel


class ProjectDashboardOut(BaseModel):
    project_id: int
    total_activities: int = 0
    recent_activities: int = 0
    pending_approvals: int = 0
    active_meetings: int = 0
    overall_progress: int = 0
    budget_utilization: int = 0
    active_contractors: int = 0
    k3_incidents: int = 0
