"""Project directory service layer: projects and their member roster."""

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from siteops.models.project import Project, ProjectMember
from siteops.schemas.project import ProjectCreate, ProjectMemberCreate

logger = logging.getLogger(__name__)


def get_project_or_404(db: Session, project_id: int) -> Project:
    project = get_project_by_id(db, project_id)
    if not project:
        logger.warning("project lookup failed: id=%s", project_id)
        raise HTTPException(status_code=404, detail=f"Project with id {project_id} not found")
    return project


def create_project(db: Session, data: ProjectCreate) -> Project:
    project = Project(**data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("project created: id=%s name=%r", project.id, project.name)
    return project


def list_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.id).all()


def get_project_by_id(db: Session, project_id: int) -> Optional[Project]:
    return db.query(Project).filter(Project.id == project_id).first()


def add_member(db: Session, data: ProjectMemberCreate) -> ProjectMember:
    get_project_or_404(db, data.project_id)
    member = ProjectMember(**data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info(
        "project member added: project=%s user=%s company=%s role=%s",
        member.project_id, member.user_id, member.company_id, member.role,
    )
    return member


def get_members(db: Session, project_id: int) -> List[ProjectMember]:
    return (
        db.query(ProjectMember)
        .filter(ProjectMember.project_id == project_id)
        .order_by(ProjectMember.id)
        .all()
    )
