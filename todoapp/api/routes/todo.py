from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from todoapp.api.error import to_http_error
from todoapp.app.services.unit_of_work import UnitOfWork
from todoapp.app.use_cases.auth import AuthenticatedUser
from todoapp.app.use_cases.todos import (
    CreateTodoCommand,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    ListTodosUseCase,
    TodoResponse,
    UpdateTodoCommand,
    UpdateTodoPositionCommand,
    UpdateTodoPositionUseCase,
    UpdateTodoUseCase,
)
from todoapp.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/todos", tags=["Todo"])


class CreateTodoRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=1000)


class UpdateTodoRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=1000)
    completed: bool = False


class UpdateTodoPositionRequest(BaseModel):
    """
    Neighbor positions of the target slot as currently displayed.

    Omit prev_pos to move to the top, omit next_pos to move to the bottom.
    """

    prev_pos: Optional[int] = Field(None, description="Position of the todo that should come before")
    next_pos: Optional[int] = Field(None, description="Position of the todo that should come after")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TodoResponse)
async def create_todo(
    request: CreateTodoRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Append a todo to the end of the list"""
    use_case = CreateTodoUseCase(uow)
    result = await use_case.execute(
        UUID(current_user.user_id), CreateTodoCommand(description=request.description)
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TodoResponse])
async def list_todos(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """All todos of the current user, in display order"""
    use_case = ListTodosUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id))

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/search", status_code=status.HTTP_200_OK, response_model=List[TodoResponse])
async def search_todos(
    keyword: str = Query("", max_length=255),
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Search todos by keyword

    Raises:
        - 400 Bad Request: Missing keyword
    """
    use_case = ListTodosUseCase(uow)
    result = await use_case.search(UUID(current_user.user_id), keyword)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.put("/{todo_id}", status_code=status.HTTP_200_OK, response_model=TodoResponse)
async def update_todo(
    todo_id: int,
    request: UpdateTodoRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update description and completion

    Raises:
        - 404 Not Found: Todo missing or owned by another user
    """
    use_case = UpdateTodoUseCase(uow)
    result = await use_case.execute(
        UUID(current_user.user_id),
        todo_id,
        UpdateTodoCommand(description=request.description, completed=request.completed),
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch("/{todo_id}/position", status_code=status.HTTP_200_OK, response_model=TodoResponse)
async def update_todo_position(
    todo_id: int,
    request: UpdateTodoPositionRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Move a todo between two neighbors

    Raises:
        - 400 Bad Request: prev_pos is not lower than next_pos
        - 404 Not Found: Todo missing or owned by another user
    """
    use_case = UpdateTodoPositionUseCase(uow)
    result = await use_case.execute(
        UUID(current_user.user_id),
        todo_id,
        UpdateTodoPositionCommand(prev_pos=request.prev_pos, next_pos=request.next_pos),
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/{todo_id}", status_code=status.HTTP_200_OK)
async def delete_todo(
    todo_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a todo

    Raises:
        - 404 Not Found: Todo missing or owned by another user
    """
    use_case = DeleteTodoUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id), todo_id)

    if result.is_err():
        raise to_http_error(result.error)

    return {"message": "Todo deleted"}
