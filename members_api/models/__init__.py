"""Database models.

Import from here:  from members_api.models import Base, Member
"""

from .base import Base  # noqa: F401
from .member import Member  # noqa: F401
