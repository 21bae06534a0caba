from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from todoapp.api.error import to_http_error
from todoapp.api.routes.auth import clear_session_cookie
from todoapp.app.services.session_store import ISessionStore
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.app.use_cases.auth import AuthenticatedUser, LogoutUseCase
from todoapp.app.use_cases.users import (
    DeleteUserUseCase,
    GetMeUseCase,
    UpdateUsernameUseCase,
    UserProfile,
)
from todoapp.depends import get_current_user, get_session_store, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user profile

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: User no longer exists
    """
    use_case = GetMeUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id))

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class UpdateUsernameRequest(BaseModel):
    """Update username HTTP request payload"""

    username: str = Field(..., min_length=1, max_length=255, description="New username")


@router.patch("/me/username", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_username(
    request: UpdateUsernameRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change username

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: User no longer exists
    """
    use_case = UpdateUsernameUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id), request.username)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/me", status_code=status.HTTP_200_OK)
async def delete_me(
    response: Response,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    sessions: ISessionStore = Depends(get_session_store),
):
    """
    Delete account

    Removes the user with all of their todos and ends the current session.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Session could not be deleted
    """
    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id))

    if result.is_err():
        raise to_http_error(result.error)

    logout_result = await LogoutUseCase(sessions).execute(current_user.session_id)
    if logout_result.is_err():
        raise to_http_error(logout_result.error)

    clear_session_cookie(response)
    return {"message": "User deleted"}
