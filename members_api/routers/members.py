"""
routers/members.py — Member CRUD Routes

Five endpoints over /members, registered from an explicit route table.
The MemberService is passed in when the router is built; handlers close
over it and forward decoded arguments unchanged.

Business Rules:
- Bodies decode through MemberIn; decode failures surface as 400
- Unknown ids raise MemberNotFoundError in the service and surface as 404
- DELETE answers 204 with an empty body
- One service call per request, no caching, no retries

Called by: main.py (create_app)
Depends on: services/member_service.py, schemas/members.py
"""

from fastapi import APIRouter, Response

from ..schemas.members import MemberIn, MemberOut
from ..services.member_service import MemberService


def build_members_router(service: MemberService) -> APIRouter:
    """Return an APIRouter whose handlers forward to ``service``."""
    router = APIRouter(tags=["members"])

    def create_member(body: MemberIn):
        """Create a Member; the id is assigned by the store."""
        return service.create(body)

    def list_members():
        """List all Members ordered by id."""
        return service.list()

    def get_member(member_id: int):
        return service.get(member_id)

    def update_member(member_id: int, body: MemberIn):
        """Replace name and email of an existing Member."""
        return service.update(member_id, body)

    def delete_member(member_id: int):
        service.delete(member_id)
        return Response(status_code=204)

    routes = (
        ("POST", "/members", create_member, 201, MemberOut),
        ("GET", "/members", list_members, 200, list[MemberOut]),
        ("GET", "/members/{member_id}", get_member, 200, MemberOut),
        ("PUT", "/members/{member_id}", update_member, 200, MemberOut),
        ("DELETE", "/members/{member_id}", delete_member, 204, None),
    )
    for method, path, endpoint, status_code, response_model in routes:
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            status_code=status_code,
            response_model=response_model,
        )
    return router
