"""Work Experience Routes — CRUD for the CV timeline, newest start_date first."""

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import get_work_experience_repository
from portfolio_api.repositories.work_experience import WorkExperienceRepository
from portfolio_api.schemas.common import MessageResponse
from portfolio_api.schemas.work_experience import (
    WorkExperienceResponse, WorkExperienceWrite,
)

router = APIRouter(prefix="/api/experiences", tags=["experiences"])


@router.get("", response_model=list[WorkExperienceResponse])
async def list_experiences(
    repo: WorkExperienceRepository = Depends(get_work_experience_repository),
):
    return await repo.list_all()


@router.get("/{experience_id}", response_model=WorkExperienceResponse)
async def get_experience(
    experience_id: str,
    repo: WorkExperienceRepository = Depends(get_work_experience_repository),
):
    return await repo.get_by_id(experience_id)


@router.post("", response_model=WorkExperienceResponse)
async def create_experience(
    body: WorkExperienceWrite,
    repo: WorkExperienceRepository = Depends(get_work_experience_repository),
):
    return await repo.create(body.model_dump())


@router.put("/{experience_id}", response_model=WorkExperienceResponse)
async def update_experience(
    experience_id: str,
    body: WorkExperienceWrite,
    repo: WorkExperienceRepository = Depends(get_work_experience_repository),
):
    return await repo.update(experience_id, body.model_dump())


@router.delete("/{experience_id}", response_model=MessageResponse)
async def delete_experience(
    experience_id: str,
    repo: WorkExperienceRepository = Depends(get_work_experience_repository),
):
    await repo.delete(experience_id)
    return MessageResponse(msg="Experience removed")
