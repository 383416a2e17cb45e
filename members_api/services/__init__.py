"""
services/ — Business logic behind the routers.

Routers never touch the database directly; they call a service
instance handed to them when the app is built.
"""

from .member_service import MemberNotFoundError, MemberService  # noqa: F401
