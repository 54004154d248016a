"""ContactMessage ORM — a message left through the public contact form.

Invariants:
    - is_read and created_at are filled by the store at insert time
    - After insert only is_read is ever mutated

Design Decisions:
    - server_default over Python-side default: rows inserted by other tools get
      the same defaults (ADR: store owns column defaults)
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.db.base import Base


class ContactMessage(Base):
    """ContactMessage entity."""
    __tablename__ = "contact_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=false(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
