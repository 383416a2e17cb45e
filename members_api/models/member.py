"""Member model."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Member(Base):
    __tablename__ = "members"
    # AUTOINCREMENT on SQLite: ids of deleted rows are never handed out again
    __table_args__ = (
        Index("ix_members_email", "email"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Member id={self.id} email={self.email!r}>"
