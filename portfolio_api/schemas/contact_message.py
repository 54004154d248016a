"""Contact Message Schemas — public form payload and admin listing shape."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_api.schemas.common import require_text


class ContactMessageCreate(BaseModel):
    """Contact form submission. is_read and created_at are set by the store."""
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str

    @field_validator("name", "email", "subject", "message")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        return require_text(v)


class ContactMessageResponse(BaseModel):
    """Stored contact message."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    is_read: bool
    created_at: datetime
