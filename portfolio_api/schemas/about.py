"""About Schemas — request and response shapes for /api/about.

Invariants:
    - AboutWrite replaces the whole profile: every field present, optional
      contact details sent as null when absent
    - AboutResponse never exposes the singleton_key column
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_api.schemas.common import require_text


class AboutWrite(BaseModel):
    """About upsert payload."""
    name: str = Field(max_length=255)
    title: str = Field(max_length=255)
    bio: str
    image_url: str | None = Field(max_length=512)
    email: str | None = Field(max_length=255)
    phone: str | None = Field(max_length=64)
    location: str | None = Field(max_length=255)

    @field_validator("name", "title")
    @classmethod
    def check_identity_not_blank(cls, v: str) -> str:
        return require_text(v)


class AboutResponse(BaseModel):
    """About profile as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    title: str
    bio: str
    image_url: str | None
    email: str | None
    phone: str | None
    location: str | None
