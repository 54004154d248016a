"""Project Schemas — request and response shapes for /api/projects.

Invariants:
    - ProjectWrite is used for both POST and PUT: PUT is full replacement, so
      every field must be present (nullable URLs sent explicitly as null)
    - title must not be blank; values are stored exactly as sent
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_api.schemas.common import require_text


class ProjectWrite(BaseModel):
    """Project create/replace payload."""
    title: str = Field(max_length=255)
    description: str
    image_url: str | None = Field(max_length=512)
    project_url: str | None = Field(max_length=512)
    tags: str = Field(max_length=255)

    @field_validator("title")
    @classmethod
    def check_title_not_blank(cls, v: str) -> str:
        return require_text(v)


class ProjectResponse(BaseModel):
    """Project as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    image_url: str | None
    project_url: str | None
    tags: str
