from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from todoapp.api.error import to_http_error
from todoapp.app.services.password_hasher import IPasswordHasher
from todoapp.app.services.session_store import ISessionStore
from todoapp.app.services.token_service import ITokenService
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.app.use_cases.auth import (
    AuthenticatedUser,
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
)
from todoapp.depends import (
    get_current_user,
    get_password_hasher,
    get_session_id,
    get_session_store,
    get_session_ttl_seconds,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])


def set_session_cookie(response: Response, session_id: str, max_age: int) -> None:
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


class RegisterRequest(BaseModel):
    """Register HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, max_length=72, description="User password (8-72 chars)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password)

    use_case = RegisterUseCase(uow, password_hasher)
    result = await use_case.execute(command)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login HTTP response; the session id travels in the session cookie"""

    user_id: str
    access_token: str


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    current_session_id: Optional[str] = Depends(get_session_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    tokens: ITokenService = Depends(get_token_service),
    sessions: ISessionStore = Depends(get_session_store),
    session_ttl_seconds: int = Depends(get_session_ttl_seconds),
):
    """
    User Login

    Starts a new server-side session (clearing the one in the cookie, if
    any) and returns an access token bound to it.

    Raises:
        - 401 Unauthorized: Invalid email or password
        - 500 Internal Server Error: Session could not be saved
    """
    use_case = LoginUseCase(uow, password_hasher, tokens, sessions, session_ttl_seconds)
    result = await use_case.execute(request.email, request.password, current_session_id)

    if result.is_err():
        raise to_http_error(result.error)

    login_result = result.value
    set_session_cookie(response, login_result.session_id, session_ttl_seconds)

    return LoginResponse(user_id=login_result.user_id, access_token=login_result.access_token)


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    response: Response,
    current_user: AuthenticatedUser = Depends(get_current_user),
    sessions: ISessionStore = Depends(get_session_store),
):
    """
    User Logout

    Deletes the session so the presented token stops working immediately.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 500 Internal Server Error: Session could not be deleted
    """
    use_case = LogoutUseCase(sessions)
    result = await use_case.execute(current_user.session_id)

    if result.is_err():
        raise to_http_error(result.error)

    clear_session_cookie(response)
    return {"message": "Logged out"}
