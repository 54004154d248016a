"""Work Experience Schemas — request and response shapes for /api/experiences.

Invariants:
    - start_date / end_date are ISO dates (YYYY-MM-DD)
    - end_date, when given, is not before start_date
    - Full replacement on PUT: end_date must be sent (null for ongoing positions)
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from portfolio_api.schemas.common import require_text


class WorkExperienceWrite(BaseModel):
    """Work experience create/replace payload."""
    company: str = Field(max_length=255)
    position: str = Field(max_length=255)
    description: str
    start_date: date
    end_date: date | None
    is_current: bool

    @field_validator("company", "position")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        return require_text(v)

    @model_validator(mode="after")
    def check_date_range(self) -> "WorkExperienceWrite":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class WorkExperienceResponse(BaseModel):
    """Work experience as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    company: str
    position: str
    description: str
    start_date: date
    end_date: date | None
    is_current: bool
