"""
User Use Case DTOs
"""

from pydantic import BaseModel


class UserProfile(BaseModel):
    """Public view of a user (internal id never leaves the service)"""

    user_id: str
    username: str
    email: str
