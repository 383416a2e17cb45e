"""Member service — persistence and lifecycle for Member records.

Owns the database session for every call: each operation opens a session
from the injected factory, commits on success, rolls back on failure and
closes it. Returned Members are detached rows with all columns loaded.
"""

from __future__ import annotations

from contextlib import contextmanager

from loguru import logger
from sqlalchemy.orm import Session, sessionmaker

from ..models import Member
from ..schemas.members import MemberIn

MAX_ID = 2**63 - 1
MIN_ID = -(2**63)


class MemberNotFoundError(LookupError):
    """Raised when no Member exists for the requested id."""

    def __init__(self, member_id: int):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id


class MemberService:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        db: Session = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    @staticmethod
    def _load(db: Session, member_id: int) -> Member:
        # Ids past the 64-bit INTEGER column range cannot exist in the store
        if not MIN_ID <= member_id <= MAX_ID:
            raise MemberNotFoundError(member_id)
        member = db.get(Member, member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    def create(self, data: MemberIn) -> Member:
        with self._session() as db:
            member = Member(name=data.name, email=data.email)
            db.add(member)
            db.flush()
            db.refresh(member)
            db.expunge(member)
        logger.info("Member #{} created ({})", member.id, member.email)
        return member

    def list(self) -> list[Member]:
        with self._session() as db:
            members = db.query(Member).order_by(Member.id).all()
            db.expunge_all()
        return members

    def get(self, member_id: int) -> Member:
        with self._session() as db:
            member = self._load(db, member_id)
            db.expunge(member)
        return member

    def update(self, member_id: int, data: MemberIn) -> Member:
        with self._session() as db:
            member = self._load(db, member_id)
            member.name = data.name
            member.email = data.email
            db.flush()
            db.refresh(member)
            db.expunge(member)
        logger.info("Member #{} updated", member_id)
        return member

    def delete(self, member_id: int) -> None:
        with self._session() as db:
            member = self._load(db, member_id)
            db.delete(member)
        logger.info("Member #{} deleted", member_id)
