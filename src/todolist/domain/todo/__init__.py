"""Todo domain: the owned todo entity and its scoped repository port."""

from todolist.domain.todo.entities import Todo
from todolist.domain.todo.exceptions import InvalidTodoError, TodoNotFoundError
from todolist.domain.todo.repositories import TodoRepository

__all__ = [
    "InvalidTodoError",
    "Todo",
    "TodoNotFoundError",
    "TodoRepository",
]
