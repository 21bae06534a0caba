"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    email: str
    password: str


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user_id: str


class LoginResult(BaseModel):
    """
    Result of a successful login.

    `session_id` goes into the session cookie, not the response body.
    """

    user_id: str
    access_token: str
    session_id: str


class AuthenticatedUser(BaseModel):
    """Identity of an authenticated request"""

    user_id: str
    session_id: str
