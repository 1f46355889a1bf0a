"""Todos router: CRUD on the authenticated user's todos."""

from uuid import UUID

from fastapi import APIRouter, status

from todolist.application.commands.todo import (
    CreateTodoCommand,
    DeleteTodoCommand,
    UpdateTodoCommand,
)
from todolist.application.queries.todo import GetTodoQuery, ListTodosQuery
from todolist.presentation.api.dependencies import RepoFactory
from todolist.presentation.api.schemas import (
    DataResponse,
    ErrorResponse,
    MessageDataResponse,
    TodoCreateRequest,
    TodoResponse,
    TodoUpdateRequest,
)

router = APIRouter()

_NOT_FOUND = {
    "model": ErrorResponse,
    "description": "Todo does not exist or belongs to another user",
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create todo",
    responses={
        201: {"description": "Todo created"},
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
async def create_todo(
    request: TodoCreateRequest,
    factory: RepoFactory,
) -> MessageDataResponse[TodoResponse]:
    """Create a todo owned by the authenticated user."""
    command = CreateTodoCommand.from_factory(factory)
    try:
        todo = await command.execute(
            title=request.title,
            content=request.content,
            completed=request.completed,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageDataResponse(
        message="Todo created successfully",
        data=TodoResponse.from_dto(todo),
    )


@router.get(
    "",
    summary="List todos",
    responses={401: {"model": ErrorResponse}},
)
async def list_todos(factory: RepoFactory) -> DataResponse[list[TodoResponse]]:
    """All todos of the authenticated user, newest first."""
    query = ListTodosQuery.from_factory(factory)
    todos = await query.execute()
    return DataResponse(data=[TodoResponse.from_dto(todo) for todo in todos])


@router.get(
    "/{todo_id}",
    summary="Get todo",
    responses={401: {"model": ErrorResponse}, 404: _NOT_FOUND},
)
async def get_todo(todo_id: UUID, factory: RepoFactory) -> DataResponse[TodoResponse]:
    query = GetTodoQuery.from_factory(factory)
    todo = await query.execute(todo_id)
    return DataResponse(data=TodoResponse.from_dto(todo))


@router.put(
    "/{todo_id}",
    summary="Update todo",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: _NOT_FOUND,
    },
)
async def update_todo(
    todo_id: UUID,
    request: TodoUpdateRequest,
    factory: RepoFactory,
) -> MessageDataResponse[TodoResponse]:
    command = UpdateTodoCommand.from_factory(factory)
    try:
        todo = await command.execute(
            todo_id=todo_id,
            title=request.title,
            content=request.content,
            completed=request.completed,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageDataResponse(
        message="Todo updated successfully",
        data=TodoResponse.from_dto(todo),
    )


@router.delete(
    "/{todo_id}",
    summary="Delete todo",
    responses={401: {"model": ErrorResponse}, 404: _NOT_FOUND},
)
async def delete_todo(
    todo_id: UUID,
    factory: RepoFactory,
) -> MessageDataResponse[TodoResponse]:
    """Delete a todo and return it as it was."""
    command = DeleteTodoCommand.from_factory(factory)
    try:
        todo = await command.execute(todo_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageDataResponse(
        message="Todo deleted successfully",
        data=TodoResponse.from_dto(todo),
    )
