"""Project directory RPC procedures."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from siteops.database import get_db
from siteops.schemas.project import ProjectCreate, ProjectOut, ProjectMemberCreate, ProjectMemberOut
from siteops.services import project_service

router = APIRouter(prefix="/rpc", tags=["projects"])


@router.post("/createProject", response_model=ProjectOut)
def create_project(data: ProjectCreate, db: Session = Depends(get_db)):
    return project_service.create_project(db, data)


@router.get("/getProjects", response_model=List[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    return project_service.list_projects(db)


@router.get("/getProjectById", response_model=Optional[ProjectOut])
def get_project_by_id(id: int = Query(...), db: Session = Depends(get_db)):
    return project_service.get_project_by_id(db, id)


@router.post("/addProjectMember", response_model=ProjectMemberOut)
def add_project_member(data: ProjectMemberCreate, db: Session = Depends(get_db)):
    return project_service.add_member(db, data)


@router.get("/getProjectMembers", response_model=List[ProjectMemberOut])
def get_project_members(project_id: int = Query(..., alias="projectId"), db: Session = Depends(get_db)):
    return project_service.get_members(db, project_id)
