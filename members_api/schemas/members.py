"""
schemas/members.py — Pydantic models for Member endpoints

Decodes create/update payloads and shapes Member responses.

Business Rules:
- name and email are both required strings on create and update (full replace)
- Values are forwarded exactly as sent; no trimming or case folding
- A client-supplied id in the body is ignored; ids come from the store

Called by: routers/members.py, services/member_service.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MemberIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str


class MemberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
