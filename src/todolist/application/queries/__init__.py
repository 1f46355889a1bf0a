"""Read-side use cases."""

from todolist.application.queries.todo import GetTodoQuery, ListTodosQuery
from todolist.application.queries.user import GetUserProfileQuery

__all__ = ["GetTodoQuery", "GetUserProfileQuery", "ListTodosQuery"]
