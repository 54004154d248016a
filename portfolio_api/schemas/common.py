"""Common Schemas — shapes shared by several resources."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement body for writes that return no entity."""
    msg: str


def require_text(v: str) -> str:
    """Reject blank values; non-blank values are stored exactly as sent."""
    if not v.strip():
        raise ValueError("value cannot be empty or whitespace")
    return v
