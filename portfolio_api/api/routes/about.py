"""About Routes — read and upsert the singleton profile."""

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import get_about_repository
from portfolio_api.repositories.about import AboutRepository
from portfolio_api.schemas.about import AboutResponse, AboutWrite

router = APIRouter(prefix="/api/about", tags=["about"])


@router.get("", response_model=AboutResponse)
async def get_about(repo: AboutRepository = Depends(get_about_repository)):
    return await repo.get_singleton()


@router.put("", response_model=AboutResponse)
async def upsert_about(
    body: AboutWrite, repo: AboutRepository = Depends(get_about_repository),
):
    """Create the profile on first write, overwrite it afterwards."""
    return await repo.upsert_singleton(body.model_dump())
