"""About ORM — the single "about me" profile row.

Invariants:
    - At most one row exists: singleton_key is UNIQUE and CHECKed to be 1
    - singleton_key is never written by the application (server default)
    - singleton_key never leaves the persistence layer

Design Decisions:
    - Store-level constraint over a read-then-insert check: two concurrent
      first writes cannot both insert (ADR: singleton race)
    - Constraint doubles as the ON CONFLICT target for the one-statement upsert
"""

from sqlalchemy import CheckConstraint, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.db.base import Base

SINGLETON_KEY = 1


class About(Base):
    """About entity, the singleton profile."""
    __tablename__ = "about"
    __table_args__ = (
        UniqueConstraint("singleton_key", name="uq_about_singleton_key"),
        CheckConstraint(
            f"singleton_key = {SINGLETON_KEY}", name="ck_about_singleton_key",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    singleton_key: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text(str(SINGLETON_KEY)),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
