"""Project ORM — a portfolio project card.

Invariants:
    - id is store-generated and never rewritten
    - image_url and project_url are nullable; every other column is required
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.db.base import Base


class Project(Base):
    """Project entity."""
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    project_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    tags: Mapped[str] = mapped_column(String(255), nullable=False)
