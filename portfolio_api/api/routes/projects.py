"""Project Routes — CRUD for portfolio projects.

Invariants:
    - Path ids are taken as str; the repository decides whether they name a row
    - PUT replaces every field (ProjectWrite has no optional keys)
    - DELETE always answers "Project removed", present or not
"""

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import get_project_repository
from portfolio_api.repositories.project import ProjectRepository
from portfolio_api.schemas.common import MessageResponse
from portfolio_api.schemas.project import ProjectResponse, ProjectWrite

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(repo: ProjectRepository = Depends(get_project_repository)):
    return await repo.list_all()


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str, repo: ProjectRepository = Depends(get_project_repository),
):
    return await repo.get_by_id(project_id)


@router.post("", response_model=ProjectResponse)
async def create_project(
    body: ProjectWrite, repo: ProjectRepository = Depends(get_project_repository),
):
    return await repo.create(body.model_dump())


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    body: ProjectWrite,
    repo: ProjectRepository = Depends(get_project_repository),
):
    return await repo.update(project_id, body.model_dump())


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: str, repo: ProjectRepository = Depends(get_project_repository),
):
    await repo.delete(project_id)
    return MessageResponse(msg="Project removed")
