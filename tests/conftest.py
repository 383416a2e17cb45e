"""
conftest.py — Shared Test Fixtures for the Members API

Provides an in-memory SQLite database, a MemberService bound to it,
and a FastAPI TestClient built around that service.

Business Rules:
- All tests run against an isolated in-memory DB (fresh schema per test)
- The app under test gets its service passed in, never the module-level one

Called by: all test files via pytest autodiscovery
Depends on: members_api.models (Base), members_api.main (create_app)
"""

import os
os.environ["TESTING"] = "1"  # Must be set before importing app modules

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from members_api.models import Base, Member
from members_api.services.member_service import MemberService

# ── In-memory SQLite engine ──────────────────────────────────────────

TEST_DB_URL = "sqlite://"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def db_session():
    """Create all tables, yield a session, then tear down."""
    Base.metadata.create_all(bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def member_service() -> MemberService:
    return MemberService(TestSessionLocal)


@pytest.fixture()
def client(member_service: MemberService) -> TestClient:
    """FastAPI TestClient wired to the in-memory MemberService."""
    from members_api.main import create_app

    app = create_app(member_service)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def test_member(db_session: Session) -> Member:
    """A stored member."""
    member = Member(name="Jack", email="jack@example.com")
    db_session.add(member)
    db_session.commit()
    db_session.refresh(member)
    return member
